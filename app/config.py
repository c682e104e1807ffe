"""
Configuration settings for the Seoul Population API application.
Centralizes all configuration parameters for easy management.
"""

import os

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(levelname)5s][%(filename)s:%(lineno)s] %(message)s"

# District mappings - internal id (1-25) -> administrative code used by the backend
DISTRICT_CODE_MAP = {
    1: '11680',   # 강남구
    2: '11740',   # 강동구
    3: '11305',   # 강북구
    4: '11500',   # 강서구
    5: '11620',   # 관악구
    6: '11215',   # 광진구
    7: '11530',   # 구로구
    8: '11545',   # 금천구
    9: '11350',   # 노원구
    10: '11320',  # 도봉구
    11: '11230',  # 동대문구
    12: '11590',  # 동작구
    13: '11440',  # 마포구
    14: '11410',  # 서대문구
    15: '11650',  # 서초구
    16: '11200',  # 성동구
    17: '11290',  # 성북구
    18: '11710',  # 송파구
    19: '11470',  # 양천구
    20: '11560',  # 영등포구
    21: '11170',  # 용산구
    22: '11380',  # 은평구
    23: '11110',  # 종로구
    24: '11140',  # 중구
    25: '11260'   # 중랑구
}

DISTRICT_NAMES = {
    1: '강남구', 2: '강동구', 3: '강북구', 4: '강서구', 5: '관악구',
    6: '광진구', 7: '구로구', 8: '금천구', 9: '노원구', 10: '도봉구',
    11: '동대문구', 12: '동작구', 13: '마포구', 14: '서대문구', 15: '서초구',
    16: '성동구', 17: '성북구', 18: '송파구', 19: '양천구', 20: '영등포구',
    21: '용산구', 22: '은평구', 23: '종로구', 24: '중구', 25: '중랑구'
}

# Values at or above this are administrative codes, below are internal ids
CODE_THRESHOLD = 11000

# Age buckets in ascending age order (backend AgeBucket enum)
AGE_BUCKETS = [
    'F0T9', 'F10T14', 'F15T19', 'F20T24', 'F25T29', 'F30T34', 'F35T39',
    'F40T44', 'F45T49', 'F50T54', 'F55T59', 'F60T64', 'F65T69', 'F70T74'
]

AGE_BUCKET_LABELS = {
    'all': '전체',
    '10s': '10대',
    '20s': '20대',
    '30s': '30대',
    '40s': '40대',
    '50s': '50대',
    '60plus': '60대+'
}

GENDER_LABELS = {
    'all': '전체',
    'male': '남성',
    'female': '여성'
}

# Weekday names, Monday first
WEEKDAY_NAMES = ['월요일', '화요일', '수요일', '목요일', '금요일', '토요일', '일요일']

# Hour of day accepted by the hourly chart (0-23)
MAX_HOUR = 23

# Number of districts shown in rankings unless the caller asks otherwise
TOP_DISTRICTS_DEFAULT = 5

# Pyramid chart axis
AXIS_DEFAULT_DOMAIN = (-1000, 1000)
AXIS_PADDING = 1.1

# API Configuration
API_TITLE = "Seoul Population API"
API_DESCRIPTION = """
API for reshaping Seoul floating-population statistics into chart-ready series.
Consumes aggregates produced by the population backend and returns flat
series and tables for the dashboard.

## Sections:
- **Districts**: Internal id / administrative code registry
- **Population**: Age distribution, pyramid, weekday, week, monthly and hourly
  series, and district rankings
- **Favorites**: Per-user favorite districts
"""
API_VERSION = "1.0.0"

# CORS settings (for frontend integration)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]
