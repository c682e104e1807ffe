"""
District code registry.

The dashboard addresses districts by a small internal id (1-25) while the
population backend expects 5-digit administrative codes. This module is the
only place the two identifier spaces are converted.
"""

from typing import Dict, List, Optional, Union
import logging

from app.config import CODE_THRESHOLD, DISTRICT_CODE_MAP, DISTRICT_NAMES
from app.exceptions import InvalidDistrictId
from app.models.schemas import District

logger = logging.getLogger(__name__)


class DistrictRegistry:
    """
    Static bidirectional mapping between internal ids and administrative codes.
    """

    def __init__(
        self,
        code_map: Dict[int, str] = DISTRICT_CODE_MAP,
        names: Dict[int, str] = DISTRICT_NAMES
    ):
        self._code_map = dict(code_map)
        self._names = dict(names)

    def internal_id_to_code(self, internal_id) -> Optional[str]:
        """Return the administrative code for an internal id, or None"""
        if isinstance(internal_id, bool) or not isinstance(internal_id, int):
            return None
        return self._code_map.get(internal_id)

    def code_to_internal_id(self, code: Union[str, int]) -> Optional[int]:
        """
        Reverse lookup of an administrative code.

        Numeric codes are compared as strings, so 11680 and "11680"
        resolve to the same district.
        """
        if code is None:
            return None
        code_str = str(code)
        for internal_id, known_code in self._code_map.items():
            if known_code == code_str:
                return internal_id
        return None

    def resolve_district_code(self, value: int) -> str:
        """
        Turn a value that is either an internal id or an administrative
        code into an administrative code for a backend query.

        Values >= CODE_THRESHOLD are taken to be administrative codes already
        and are passed through. The identifier spaces are told apart by
        magnitude only: internal ids stop at 25 and every Seoul code starts
        at 11110.

        Raises:
            InvalidDistrictId: value is below the threshold and has no mapping
        """
        if isinstance(value, int) and not isinstance(value, bool) and value >= CODE_THRESHOLD:
            return str(value)

        code = self.internal_id_to_code(value)
        if code is None:
            logger.error(f"No administrative code for district id {value!r}")
            raise InvalidDistrictId(value)
        return code

    def get_district(self, internal_id: int) -> Optional[District]:
        """Full district record for an internal id, or None"""
        code = self.internal_id_to_code(internal_id)
        if code is None:
            return None
        return District(
            internal_id=internal_id,
            administrative_code=code,
            name=self._names.get(internal_id, f"District {internal_id}")
        )

    def list_districts(self) -> List[District]:
        """All districts ordered by internal id"""
        return [self.get_district(internal_id) for internal_id in sorted(self._code_map)]


# Singleton instance
district_registry = DistrictRegistry()
