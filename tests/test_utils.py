import json
import logging

import pytest
import yaml

from SMT.errors import DecodeError, EncodeError
from SMT.schema.spdx_model import Algorithm, ReferenceCategory
from SMT.tool.util.utils import Util


def test_parse_document_applies_schema_defaults(make_package):
    pkg = make_package()
    del pkg["filesAnalyzed"]
    content = json.dumps({
        "spdxVersion": "SPDX-2.3",
        "creationInfo": {"created": "2020-01-01T00:00:00Z"},
        "packages": [pkg],
    })

    doc = Util.parse_document(content)

    assert doc.SPDXID == "SPDXRef-DOCUMENT"
    assert doc.name == ""
    assert doc.creationInfo.creators == frozenset()
    assert doc.files is None
    package = next(iter(doc.packages))
    assert package.filesAnalyzed is False
    ref = next(iter(package.externalRefs))
    assert ref.referenceCategory is ReferenceCategory.PACKAGE_MANAGER


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"spdxVersion": "SPDX-2.3"}),
        json.dumps({
            "spdxVersion": "SPDX-2.3",
            "creationInfo": {"created": "2020-01-01T00:00:00Z"},
            "packages": "requests",
        }),
        json.dumps({
            "spdxVersion": "SPDX-2.3",
            "creationInfo": {"created": "2020-01-01T00:00:00Z"},
            "relationships": [{"relationshipType": "LIKES"}],
        }),
        json.dumps({
            "spdxVersion": "SPDX-2.3",
            "creationInfo": {"created": "2020-01-01T00:00:00Z"},
            "unknownField": True,
        }),
        b'{"spdxVersion": "SPDX-2.3", "name": "\xff"}',
    ],
    ids=["invalid-json", "missing-creation-info", "type-mismatch", "bad-enum", "unknown-field", "invalid-utf8"],
)
def test_parse_document_rejects_malformed_input(content):
    with pytest.raises(DecodeError):
        Util.parse_document(content, "bad.spdx.json")


def test_load_document_reports_missing_file(tmp_path):
    path = str(tmp_path / "missing.spdx.json")

    with pytest.raises(DecodeError) as excinfo:
        Util.load_document(path)

    assert excinfo.value.source == path
    assert path in str(excinfo.value)


def test_load_document_reads_file(write_document):
    doc = Util.load_document(write_document("a.spdx.json"))

    assert doc.name == "SBOM-A"
    assert len(doc.packages) == 1


def test_invalid_purl_is_logged(make_document, make_package, caplog):
    pkg = make_package(externalRefs=[{
        "referenceCategory": "PACKAGE-MANAGER",
        "referenceType": "purl",
        "referenceLocator": "requests@2.31.0",
    }])
    content = json.dumps(Util.to_dict(make_document(packages=[pkg])))

    with caplog.at_level(logging.WARNING):
        Util.parse_document(content)

    assert "invalid purl" in caplog.text
    assert "SPDXRef-Package-requests" in caplog.text


def test_to_dict_omits_absent_optionals_and_keeps_required_defaults(make_document, make_package):
    pkg = make_package()
    del pkg["supplier"]
    bom_dict = Util.to_dict(make_document(packages=[pkg]))

    package = bom_dict["packages"][0]
    assert "supplier" not in package
    assert "checksums" not in package
    assert package["filesAnalyzed"] is False
    assert bom_dict["creationInfo"]["created"].startswith("2020-01-01T00:00:00")


def test_sets_serialize_in_a_stable_order(make_document, make_package):
    packages = [make_package(f"SPDXRef-Package-{name}", name=name) for name in ("zlib", "attrs", "idna")]
    forward = Util.dump_document(make_document(packages=packages))
    backward = Util.dump_document(make_document(packages=list(reversed(packages))))

    assert forward == backward
    names = [pkg["name"] for pkg in json.loads(forward)["packages"]]
    assert names == sorted(names, key=lambda n: f"SPDXRef-Package-{n}")


def test_dump_document_round_trips(make_document):
    doc = make_document(files=[{
        "SPDXID": "SPDXRef-File-1",
        "fileName": "./setup.py",
        "fileTypes": ["SOURCE"],
        "checksums": [{"algorithm": "SHA256", "checksumValue": "ab"}],
    }])

    again = Util.parse_document(Util.dump_document(doc))

    assert again == doc
    file = next(iter(again.files))
    assert next(iter(file.checksums)).algorithm is Algorithm.SHA256


def test_dump_document_yaml(make_document):
    doc = make_document()

    assert yaml.safe_load(Util.dump_document(doc, "yaml")) == Util.to_dict(doc)


def test_dump_document_rejects_unknown_format(make_document):
    with pytest.raises(EncodeError):
        Util.dump_document(make_document(), "xml")


def test_make_output_writes_hash_file(make_document, tmp_path):
    output = str(tmp_path / "merged.spdx.json")

    bom_hash = Util.make_output(make_document(), output)

    assert bom_hash == Util.toHash(output)
    with open(output + ".sha256") as f:
        assert f.read() == f"sha256: {bom_hash}"
    with open(output) as f:
        assert json.load(f)["name"] == "SBOM-A"


def test_make_output_prints_to_stdout(make_document, capsys):
    assert Util.make_output(make_document()) is None

    assert json.loads(capsys.readouterr().out)["name"] == "SBOM-A"


def test_load_document_rejects_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.spdx.json"
    path.write_bytes('{"name": "Bj\u00f6rk"}'.encode("latin-1"))

    with pytest.raises(DecodeError) as excinfo:
        Util.load_document(str(path))

    assert excinfo.value.source == str(path)
    assert "UTF-8" in str(excinfo.value)


def test_file_artifact_of_round_trips(make_document):
    doc = make_document(files=[{
        "SPDXID": "SPDXRef-File-1",
        "fileName": "./setup.py",
        "checksums": [{"algorithm": "SHA1", "checksumValue": "85ed0817af83a24ad8da68c2b5094de69833983c"}],
        "artifactOfs": [{"name": "Jena", "homePage": "http://jena.apache.org/"}],
    }])

    bom_dict = Util.to_dict(doc)
    again = Util.parse_document(Util.dump_document(doc))

    assert bom_dict["files"][0]["artifactOfs"] == [{"name": "Jena", "homePage": "http://jena.apache.org/"}]
    assert again == doc


def test_make_output_reports_unwritable_path(make_document, tmp_path):
    output = str(tmp_path / "missing-dir" / "merged.spdx.json")

    with pytest.raises(EncodeError, match="missing-dir"):
        Util.make_output(make_document(), output)
