"""Tests for the reference document model."""

from datetime import datetime

from pyqt_doclist.model import Document, type_of
from pyqt_doclist.protocols import ContainerType, DocumentElement


def test_type_of():
    assert type_of(None) == "Null"
    assert type_of(True) == "Boolean"
    assert type_of(1) == "Int32"
    assert type_of(2 ** 40) == "Int64"
    assert type_of(1.5) == "Double"
    assert type_of("x") == "String"
    assert type_of({}) == "Object"
    assert type_of([]) == "Array"
    assert type_of(datetime(2020, 1, 1)) == "Date"
    assert type_of(b"\x00") == "Binary"


def test_type_of_object_id(make_object_id):
    assert type_of(make_object_id("507f1f77bcf86cd799439011")) == "ObjectId"


def test_elements_implement_contract():
    doc = Document({"a": 1})
    assert isinstance(doc.elements[0], DocumentElement)


def test_nested_elements():
    doc = Document({"_id": 1, "sub": {"x": 1, "y": 2}, "tags": ["a", "b"]})
    sub = doc.get("sub")
    tags = doc.get("tags")
    assert [el.current_key for el in sub.elements] == ["x", "y"]
    assert [el.current_key for el in tags.elements] == ["0", "1"]
    assert sub.elements[0].parent_container_type() is ContainerType.OBJECT
    assert tags.elements[0].parent_container_type() is ContainerType.ARRAY
    assert doc.elements[0].parent_container_type() is ContainerType.DOCUMENT


def test_root_id_not_editable_on_existing_document():
    doc = Document({"_id": 1, "name": "a", "sub": {"_id": 2}})
    assert not doc.get("_id").is_key_editable()
    assert doc.get("name").is_key_editable()
    # Nested _id is an ordinary key
    assert doc.get("sub").elements[0].is_key_editable()


def test_field_renamed_to_id_stays_editable():
    doc = Document({"_id": 1, "a": 2})
    field = doc.get("a")
    field.rename("_id")
    assert field.is_key_editable()
    assert not doc.elements[0].is_key_editable()


def test_root_id_editable_on_new_document():
    doc = Document({"_id": 1}, is_new=True)
    assert doc.get("_id").is_added()
    assert doc.get("_id").is_key_editable()


def test_duplicate_key_checks_siblings_only():
    doc = Document({"a": 1, "b": 2, "sub": {"a": 3}})
    a = doc.get("a")
    assert a.is_duplicate_key("b")
    assert not a.is_duplicate_key("a")
    assert not a.is_duplicate_key("c")
    # Keys in nested containers are not siblings
    assert not doc.get("sub").elements[0].is_duplicate_key("b")


def test_rename_and_generate_object():
    doc = Document({"_id": 1, "name": "a", "sub": {"x": 1}})
    doc.get("name").rename("title")
    doc.get("sub").elements[0].rename("z")
    assert doc.generate_object() == {"_id": 1, "title": "a", "sub": {"z": 1}}
    assert doc.get("title").is_renamed()
    assert doc.is_modified()
    # Raw record untouched
    assert doc.doc == {"_id": 1, "name": "a", "sub": {"x": 1}}


def test_rename_accepts_duplicates():
    doc = Document({"a": 1, "b": 2})
    doc.get("b").rename("a")
    assert [el.current_key for el in doc.elements] == ["a", "a"]


def test_remove_element_marks_modified():
    doc = Document({"_id": 1, "a": 2})
    assert not doc.is_modified()
    doc.remove_element(doc.get("_id"))
    assert doc.is_modified()
    assert doc.generate_object() == {"a": 2}
