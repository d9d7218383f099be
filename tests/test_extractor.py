import pytest

from k8split.core.errors import DocumentParseError
from k8split.core.models import ResourceIdentity
from k8split.splitting.extractor import extract_identity, parse_document


def test_parse_valid_document():
    doc = parse_document(b"kind: Pod\nmetadata:\n  name: foo\n  namespace: bar\n", 0)
    assert doc["kind"] == "Pod"
    assert doc["metadata"]["name"] == "foo"


@pytest.mark.parametrize("chunk", [b"", b"\n\n", b"# only a comment\n", b"{}"])
def test_blank_documents_parse_to_none(chunk):
    assert parse_document(chunk, 3) is None


def test_unparsable_document_names_its_index():
    with pytest.raises(DocumentParseError) as excinfo:
        parse_document(b"kind: [Pod\nmetadata: {", 2)
    assert excinfo.value.index == 2
    assert "2'th document" in str(excinfo.value)


def test_top_level_list_is_a_parse_error():
    with pytest.raises(DocumentParseError):
        parse_document(b"- kind: Pod\n", 0)


def test_invalid_utf8_is_a_parse_error():
    with pytest.raises(DocumentParseError):
        parse_document(b"kind: \xff\xfe\xfa", 0)


def test_extract_full_identity():
    result = extract_identity({"kind": "Pod", "metadata": {"name": "foo", "namespace": "bar"}})
    assert result.ok
    assert result.identity == ResourceIdentity("Pod", "foo", "bar")
    assert result.identity.filename == "Pod__foo__bar.yaml"


def test_namespace_defaults_to_own_name():
    result = extract_identity({"kind": "Namespace", "metadata": {"name": "team-a"}})
    assert result.identity == ResourceIdentity("Namespace", "team-a", "team-a")


def test_namespace_kind_keeps_explicit_namespace():
    result = extract_identity({"kind": "Namespace", "metadata": {"name": "a", "namespace": "b"}})
    assert result.identity.namespace == "b"


@pytest.mark.parametrize("document, missing", [
    ({"metadata": {"name": "foo", "namespace": "bar"}}, "kind"),
    ({"kind": 7, "metadata": {"name": "foo", "namespace": "bar"}}, "kind"),
    ({"kind": "Pod"}, "metadata"),
    ({"kind": "Pod", "metadata": "foo"}, "metadata"),
    ({"kind": "Pod", "metadata": {"namespace": "bar"}}, "metadata.name"),
    ({"kind": "Pod", "metadata": {"name": 12, "namespace": "bar"}}, "metadata.name"),
    ({"kind": "Pod", "metadata": {"name": "foo"}}, "metadata.namespace"),
    ({"kind": "Namespace", "metadata": {}}, "metadata.name"),
])
def test_failed_extraction_names_the_field(document, missing):
    result = extract_identity(document)
    assert not result.ok
    assert result.identity is None
    assert result.missing == missing


def test_only_first_document_of_a_chunk_is_parsed():
    chunk = b"kind: Pod\nmetadata:\n  name: a\n  namespace: ns1\n---\nkind: [not parsed\n"
    doc = parse_document(chunk, 0)
    assert doc["kind"] == "Pod"


def test_chunk_ending_in_document_marker():
    doc = parse_document(b"kind: Service\nmetadata:\n  name: b\n  namespace: ns1\n---", 1)
    assert extract_identity(doc).identity == ResourceIdentity("Service", "b", "ns1")


def test_duplicate_keys_are_accepted():
    chunk = (
        b"kind: Deployment\n"
        b"metadata:\n"
        b"  name: web\n"
        b"  namespace: prod\n"
        b"  labels: {x: '1'}\n"
        b"  labels: {y: '2'}\n"
    )
    doc = parse_document(chunk, 0)
    assert extract_identity(doc).identity == ResourceIdentity("Deployment", "web", "prod")
    assert "labels" in doc["metadata"]
