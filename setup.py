"""
Commute Pass Planner - Build Script

This script packages the commute_pass FastAPI service.
"""

from setuptools import setup, find_packages


setup(
    name='commute-pass-planner',
    version='1.2.0',
    author='Commute Pass Team',
    description='Commuter pass vs IC card fare planner with same-price pass extension',
    long_description='''
    Shortest-distance routing over a subway network, monthly IC card cost vs
    1/3/6-month commuter pass comparison with break-even days, and
    recommendation of a wider pass that costs the same as the rider's own.
    ''',
    packages=find_packages(include=['commute_pass', 'commute_pass.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'uvicorn>=0.22.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
        ],
    },
    zip_safe=False,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Framework :: FastAPI',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
