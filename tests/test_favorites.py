# tests/test_favorites.py
import pytest

from app.exceptions import InvalidDistrictId


class TestInMemoryFavoritesStore:
    """InMemoryFavoritesStore 테스트"""

    def test_get_unknown_user_is_empty(self, store):
        """즐겨찾기가 없는 사용자 조회 테스트"""
        # when / then
        assert store.get("1") == []

    def test_add_keeps_insertion_order(self, store):
        """추가한 순서대로 조회되는지 테스트"""
        # when
        store.add("1", 13)
        store.add("1", 1)

        # then
        assert store.get("1") == [13, 1]

    def test_add_is_idempotent(self, store):
        """같은 자치구를 두 번 추가해도 한 번만 저장되는지 테스트"""
        # when
        store.add("1", 5)
        result = store.add("1", 5)

        # then
        assert result == [5]

    def test_add_unknown_district_raises(self, store):
        """매핑되지 않는 자치구 추가 시 InvalidDistrictId 발생 테스트"""
        # when / then
        with pytest.raises(InvalidDistrictId):
            store.add("1", 26)
        assert store.get("1") == []

    def test_remove(self, store):
        """즐겨찾기 삭제 테스트"""
        # given
        store.add("1", 3)
        store.add("1", 4)

        # when
        result = store.remove("1", 3)

        # then
        assert result == [4]

    def test_remove_missing_is_noop(self, store):
        """없는 즐겨찾기 삭제는 아무 변화가 없는지 테스트"""
        # when / then
        assert store.remove("1", 3) == []

    def test_users_are_isolated(self, store):
        """사용자별로 즐겨찾기가 분리되는지 테스트"""
        # when
        store.add("1", 3)
        store.add("2", 7)

        # then
        assert store.get("1") == [3]
        assert store.get("2") == [7]

    def test_returned_list_is_a_copy(self, store):
        """반환된 리스트를 수정해도 저장소가 바뀌지 않는지 테스트"""
        # given
        store.add("1", 3)

        # when
        store.get("1").append(99)

        # then
        assert store.get("1") == [3]
