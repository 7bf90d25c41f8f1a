"""
Commute Pass Planner: 통근 경로, 정기권 손익분기, 확장 정기권 추천
"""
