"""Domain errors raised by the service layer.

Each error carries the HTTP status code the transport layer answers with, so
routers never need to know which service failed or why.
"""

from dataclasses import dataclass


class FolioError(Exception):
    status_code = 400

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def errors(self) -> list[dict]:
        return []


class NotFound(FolioError):
    status_code = 404

    def __init__(self, resource: str, resource_id: int | None = None) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.resource_id = resource_id


class NoAuthors(FolioError):
    def __init__(self) -> None:
        super().__init__("A book cannot be created without authors")


class UnknownAuthor(FolioError):
    def __init__(self, missing_ids: list[int], duplicate_ids: list[int] | None = None) -> None:
        super().__init__("One of the submitted authors does not exist or is repeated")
        self.missing_ids = missing_ids
        self.duplicate_ids = duplicate_ids or []

    def errors(self) -> list[dict]:
        return [
            {"author_id": author_id, "rule": "missing"} for author_id in self.missing_ids
        ] + [
            {"author_id": author_id, "rule": "duplicate"} for author_id in self.duplicate_ids
        ]


class InvalidPatch(FolioError):
    pass


@dataclass(frozen=True)
class FieldError:
    field: str
    rule: str
    message: str


class ValidationFailed(FolioError):
    status_code = 422

    def __init__(self, field_errors: list[FieldError]) -> None:
        super().__init__("Validation failed")
        self.field_errors = field_errors

    def errors(self) -> list[dict]:
        return [
            {"field": e.field, "rule": e.rule, "message": e.message}
            for e in self.field_errors
        ]


class IdentityNotFound(FolioError):
    status_code = 401

    def __init__(self, detail: str = "Caller identity could not be resolved") -> None:
        super().__init__(detail)
