"""
정적 데이터 캐시 (거리, 역 메타데이터, 요금표, 그래프)
"""
