# tests/test_helpers.py
import pytest

from app.exceptions import InvalidDistrictId
from app.models.schemas import PeriodType
from app.services.query_params import (
    build_query_params, build_query_params_from_filters, parse_filter_params
)
from app.utils.helpers import (
    age_bucket_label, format_age_group_label, format_population,
    gender_label, generate_hour_labels, hour_label, month_label
)


class TestFormatting:
    """표시용 포맷 함수 테스트"""

    @pytest.mark.parametrize("bucket, expected", [
        ("F0T9", "0-9"),
        ("F20T24", "20-24"),
        ("F70T74", "70-74"),
        ("F75PLUS", "75PLUS"),
        ("F80T", "80-"),
    ])
    def test_format_age_group_label(self, bucket, expected):
        """연령대 키 -> 표시 라벨 변환 테스트"""
        # when / then
        assert format_age_group_label(bucket) == expected

    def test_format_age_group_label_suffix(self):
        """'세' 접미사 테스트"""
        # when / then
        assert format_age_group_label("F10T14", with_suffix=True) == "10-14세"

    def test_hour_labels(self):
        """시간 라벨 테스트"""
        # when
        labels = generate_hour_labels()

        # then
        assert hour_label(7) == "07:00"
        assert len(labels) == 24
        assert labels[0] == "00:00"
        assert labels[-1] == "23:00"

    def test_month_label(self):
        """월 라벨 테스트"""
        # when / then
        assert month_label(2024, 5) == "2024년 5월"
        assert month_label(2023, 12) == "2023년 12월"

    @pytest.mark.parametrize("num, expected", [
        (0, "0"),
        (9999, "9,999"),
        (1234.5, "1,234.5"),
        (10000, "1.0만"),
        (123456, "12.3만"),
    ])
    def test_format_population(self, num, expected):
        """인구수 표시 형식 테스트"""
        # when / then
        assert format_population(num) == expected

    def test_filter_labels(self):
        """필터 값 한글 라벨 테스트"""
        # when / then
        assert gender_label("male") == "남성"
        assert gender_label("unknown") == "unknown"
        assert age_bucket_label("60plus") == "60대+"


class TestQueryParams:
    """백엔드 쿼리 파라미터 생성 테스트"""

    def test_district_id_is_sent_as_code(self):
        """내부 ID가 행정구역 코드로 변환되어 전달되는지 테스트"""
        # when
        params = build_query_params(district_id=1, date="2024-05-06")

        # then
        assert params == {"districtId": "11680", "date": "2024-05-06"}

    def test_code_passes_through(self):
        """이미 코드인 값은 그대로 전달되는지 테스트"""
        # when / then
        assert build_query_params(district_id=11440) == {"districtId": "11440"}

    def test_all_filters_are_omitted(self):
        """'all' 필터와 빈 값은 생략되는지 테스트"""
        # when
        params = build_query_params(gender="all", age_bucket="all", date="")

        # then
        assert params == {}

    def test_range_and_period(self):
        """기간과 집계 단위 파라미터 테스트"""
        # when
        params = build_query_params(
            start="2024-05-01", end="2024-05-31",
            gender="female", age_bucket="F20T24", period=PeriodType.WEEKLY
        )

        # then
        assert params == {
            "period": "WEEKLY",
            "from": "2024-05-01",
            "to": "2024-05-31",
            "gender": "female",
            "ageBucket": "F20T24",
        }

    def test_unknown_district_raises(self):
        """매핑되지 않는 ID는 InvalidDistrictId 발생 테스트"""
        # when / then
        with pytest.raises(InvalidDistrictId):
            build_query_params(district_id=30)

    def test_parse_filter_params(self):
        """쿼리 문자열 -> 필터 값 파싱 테스트"""
        # given
        query = {
            "districtId": "5",
            "gender": "male",
            "ageBucket": "20s",
            "period": "MONTHLY",
            "from": "2024-01-01",
            "to": "2024-03-31",
            "unknown": "x",
        }

        # when
        filters = parse_filter_params(query)

        # then
        assert filters.district_id == 5
        assert filters.gender == "male"
        assert filters.age_bucket == "20s"
        assert filters.period == PeriodType.MONTHLY
        assert filters.start == "2024-01-01"
        assert filters.end == "2024-03-31"

    def test_parse_ignores_bad_values(self):
        """잘못된 districtId와 period는 무시하는지 테스트"""
        # when
        filters = parse_filter_params({"districtId": "gangnam", "period": "HOURLY"})

        # then
        assert filters.district_id is None
        assert filters.period is None

    def test_filters_round_trip_to_query(self):
        """파싱한 필터로 백엔드 쿼리를 만드는지 테스트"""
        # given
        filters = parse_filter_params({"districtId": "23", "gender": "all", "date": "2024-05-06"})

        # when
        params = build_query_params_from_filters(filters)

        # then
        assert params == {"districtId": "11110", "date": "2024-05-06"}
