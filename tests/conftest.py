import json

import pytest

from SMT.schema.spdx_model import Document


def package_dict(spdx_id: str = "SPDXRef-Package-requests", **fields) -> dict:
    pkg = {
        "SPDXID": spdx_id,
        "name": "requests",
        "versionInfo": "2.31.0",
        "downloadLocation": "https://pypi.org/project/requests",
        "filesAnalyzed": False,
        "supplier": "Organization: Python Software Foundation",
        "externalRefs": [
            {
                "referenceCategory": "PACKAGE-MANAGER",
                "referenceType": "purl",
                "referenceLocator": "pkg:pypi/requests@2.31.0",
            }
        ],
    }
    pkg.update(fields)
    return pkg


def document_dict(**fields) -> dict:
    doc = {
        "SPDXID": "SPDXRef-DOCUMENT",
        "spdxVersion": "SPDX-2.3",
        "dataLicense": "CC0-1.0",
        "documentNamespace": "https://example.com/spdx/sbom-a",
        "name": "SBOM-A",
        "creationInfo": {
            "created": "2020-01-01T00:00:00Z",
            "creators": ["Tool: syft-0.90.0", "Organization: Example Inc."],
            "licenseListVersion": "3.21",
        },
        "documentDescribes": ["SPDXRef-Package-requests"],
        "packages": [package_dict()],
        "relationships": [
            {
                "spdxElementId": "SPDXRef-DOCUMENT",
                "relationshipType": "DESCRIBES",
                "relatedSpdxElement": "SPDXRef-Package-requests",
            }
        ],
    }
    doc.update(fields)
    return doc


@pytest.fixture
def make_document():
    def _make(**fields) -> Document:
        return Document.model_validate(document_dict(**fields))

    return _make


@pytest.fixture
def write_document(tmp_path):
    def _write(filename: str, **fields) -> str:
        path = tmp_path / filename
        path.write_text(json.dumps(document_dict(**fields)), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def make_package():
    return package_dict
