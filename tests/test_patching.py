from datetime import datetime

import pytest

from folio.errors import InvalidPatch
from folio.models import Book
from folio.schemas.patch import PatchOperation
from folio.services.patching import apply_patch


def _book(**kwargs):
    values = {"id": 1, "title": "Dune", "created_at": datetime(1965, 8, 1)}
    values.update(kwargs)
    return Book(**values)


def test_replace_title():
    book = _book()
    result_book, result = apply_patch(book, [{"op": "replace", "path": "/title", "value": "Dune Messiah"}])
    assert result.valid
    assert result.errors == []
    assert result_book is book
    assert book.title == "Dune Messiah"
    assert book.id == 1


def test_operations_apply_in_order():
    book = _book()
    ops = [
        {"op": "replace", "path": "/title", "value": "Children of Dune"},
        {"op": "test", "path": "/title", "value": "Children of Dune"},
        {"op": "replace", "path": "/title", "value": "God Emperor of Dune"},
    ]
    _, result = apply_patch(book, ops)
    assert result.valid
    assert book.title == "God Emperor of Dune"


def test_accepts_operation_models():
    book = _book()
    op = PatchOperation(op="add", path="/created_at", value="2020-01-02T03:04:05")
    _, result = apply_patch(book, [op])
    assert result.valid
    assert book.created_at == datetime(2020, 1, 2, 3, 4, 5)


def test_remove_optional_field():
    book = _book()
    _, result = apply_patch(book, [{"op": "remove", "path": "/created_at"}])
    assert result.valid
    assert book.created_at is None


def test_empty_title_fails_required_rule():
    book = _book()
    _, result = apply_patch(book, [{"op": "replace", "path": "/title", "value": ""}])
    assert not result.valid
    assert [(e.field, e.rule) for e in result.errors] == [("title", "required")]
    assert book.title == "Dune"


def test_removing_title_fails_required_rule():
    book = _book()
    _, result = apply_patch(book, [{"op": "remove", "path": "/title"}])
    assert not result.valid
    assert result.errors[0].rule == "required"
    assert book.title == "Dune"


def test_lowercase_title_fails():
    book = _book()
    _, result = apply_patch(book, [{"op": "replace", "path": "/title", "value": "dune"}])
    assert not result.valid
    assert result.errors[0].rule == "first_letter_capitalized"
    assert book.title == "Dune"


def test_title_too_long_fails():
    book = _book()
    _, result = apply_patch(book, [{"op": "replace", "path": "/title", "value": "D" * 251}])
    assert not result.valid
    assert result.errors[0].rule == "string_too_long"


def test_invalid_result_leaves_every_field_untouched():
    book = _book()
    ops = [
        {"op": "replace", "path": "/created_at", "value": "2001-01-01T00:00:00"},
        {"op": "replace", "path": "/title", "value": "lower"},
    ]
    _, result = apply_patch(book, ops)
    assert not result.valid
    assert book.created_at == datetime(1965, 8, 1)


@pytest.mark.parametrize("ops", [None, []])
def test_empty_document_rejected(ops):
    with pytest.raises(InvalidPatch):
        apply_patch(_book(), ops)


def test_non_whitelisted_path_rejected():
    book = _book()
    with pytest.raises(InvalidPatch, match="/id"):
        apply_patch(book, [{"op": "replace", "path": "/id", "value": 99}])
    assert book.id == 1


def test_non_whitelisted_path_rejected_after_valid_op():
    book = _book()
    ops = [
        {"op": "replace", "path": "/title", "value": "Arrakis"},
        {"op": "replace", "path": "/author_links", "value": []},
    ]
    with pytest.raises(InvalidPatch):
        apply_patch(book, ops)
    assert book.title == "Dune"


def test_unsupported_op_rejected():
    with pytest.raises(InvalidPatch):
        apply_patch(_book(), [{"op": "increment", "path": "/title", "value": 1}])


def test_malformed_path_rejected():
    with pytest.raises(InvalidPatch, match="Malformed path"):
        apply_patch(_book(), [{"op": "replace", "path": "title", "value": "Dune"}])


def test_replace_without_value_rejected():
    with pytest.raises(InvalidPatch):
        apply_patch(_book(), [{"op": "replace", "path": "/title"}])


def test_failed_test_operation_rejected():
    book = _book()
    ops = [
        {"op": "test", "path": "/title", "value": "Not Dune"},
        {"op": "replace", "path": "/title", "value": "Changed"},
    ]
    with pytest.raises(InvalidPatch, match="Test failed"):
        apply_patch(book, ops)
    assert book.title == "Dune"


def test_copy_and_move_between_whitelisted_fields():
    book = _book(created_at=None)
    _, result = apply_patch(book, [
        {"op": "copy", "from": "/created_at", "path": "/created_at"},
        {"op": "move", "from": "/title", "path": "/title"},
    ])
    assert result.valid
    assert book.title == "Dune"


def test_test_operation_matches_datetime_sent_as_string():
    book = _book()
    _, result = apply_patch(book, [
        {"op": "test", "path": "/created_at", "value": "1965-08-01T00:00:00"},
        {"op": "replace", "path": "/title", "value": "Dune Messiah"},
    ])
    assert result.valid
    assert book.title == "Dune Messiah"
    assert book.created_at == datetime(1965, 8, 1)
