"""Structural checks for inbound document batches.

Every rule runs over the whole payload and all failures are collected into
one list, so a caller sees every violated rule in a single response.
"""

from typing import Any, List, Optional, Tuple

from web.backend.api.v1.schemas import Document, ValidationFailure

REQUIRED_FIELDS = ("id", "text")


class DocumentValidationError(Exception):
    """Raised when a request body fails one or more document rules."""

    def __init__(self, failures: List[ValidationFailure]):
        super().__init__("; ".join(f.msg for f in failures))
        self.failures = failures


def _check_is_array(payload: Any) -> Optional[ValidationFailure]:
    if not isinstance(payload, list):
        return ValidationFailure(
            rule="NotAnArray", msg="Data should be an array of Document records"
        )
    return None


def _check_not_empty(payload: list) -> Optional[ValidationFailure]:
    if len(payload) == 0:
        return ValidationFailure(rule="EmptyBatch", msg="At least one record is required")
    return None


def _check_required_fields(payload: list) -> Optional[ValidationFailure]:
    for record in payload:
        for field in REQUIRED_FIELDS:
            if not isinstance(record, dict) or field not in record:
                return ValidationFailure(
                    rule="MissingField",
                    field=field,
                    msg=f"The {field} is missing in one or more of your records",
                )
    return None


def _check_field_values(payload: list) -> Optional[ValidationFailure]:
    for record in payload:
        for field in REQUIRED_FIELDS:
            value = record.get(field) if isinstance(record, dict) else None
            if not isinstance(value, str) or value.strip() == "":
                return ValidationFailure(
                    rule="InvalidFieldValue",
                    field=field,
                    msg=f"{field} should be a non-empty string",
                )
    return None


def _to_document(record: dict) -> Document:
    language = record.get("language")
    return Document(
        id=record["id"],
        text=record["text"],
        language=language if isinstance(language, str) and language else None,
    )


def validate_documents(payload: Any) -> Tuple[List[Document], List[ValidationFailure]]:
    """Check ``payload`` against the document rules.

    Returns the payload as a list of ``Document`` together with an empty
    failure list, or an empty document list together with every failure found.
    """
    failures: List[ValidationFailure] = []

    # 后面的规则依赖前面的结构前提：非数组或空数组时不再逐条检查
    checks = [_check_is_array]
    if isinstance(payload, list):
        checks.append(_check_not_empty)
        if payload:
            checks.extend([_check_required_fields, _check_field_values])

    for check in checks:
        failure = check(payload)
        if failure is not None:
            failures.append(failure)

    if failures:
        return [], failures
    return [_to_document(record) for record in payload], []


def require_documents(payload: Any) -> List[Document]:
    """Like ``validate_documents`` but raises ``DocumentValidationError``."""
    documents, failures = validate_documents(payload)
    if failures:
        raise DocumentValidationError(failures)
    return documents
