"""
Exception hierarchy for the Seoul Population API.

Client-side errors (4xx) are mapped to an ErrorResponse by the handlers
registered in app.main.
"""


class PopulationApiException(Exception):
    """Base exception class"""
    def __init__(self, message):
        super().__init__(message)
        self.message = message


# Client-side errors (4xx)
class ClientException(PopulationApiException):
    """Error caused by the caller's input"""


class InvalidDistrictId(ClientException):
    """No administrative code exists for the given internal district id"""
    def __init__(self, district_id):
        super().__init__(f"Unknown district id: {district_id!r}")
        self.district_id = district_id


class MalformedRecord(ClientException):
    """
    A single input record failed a parse or pattern match.

    Transforms never raise this; they skip the record and log an instance
    of it so the reason is recorded in one format.
    """
    def __init__(self, kind: str, record, reason: str):
        super().__init__(f"Skipped malformed {kind} record ({reason}): {record!r}")
        self.kind = kind
        self.record = record
        self.reason = reason


class EmptyInput(ClientException):
    """Input was absent, not a list, or had no usable entries"""
    def __init__(self, kind: str):
        super().__init__(f"No usable {kind} input")
        self.kind = kind
