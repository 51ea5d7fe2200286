from typing import List, Optional, AbstractSet, Iterable
import logging
import warnings
from datetime import datetime, timezone
from ... import __version__, TOOL_NAME
from ...errors import VersionMismatch
from ...schema.spdx_model import SPDX_VERSION, DATA_LICENSE, CreationInfo, Document
from ..util.utils import Util
from .combinable import combine, combine_optional, concatenate


PROVENANCE_CREATOR = f"Tool: {TOOL_NAME}-{__version__}"

# document collections merged with the optional rule
OPTIONAL_COLLECTIONS = (
    "externalDocumentRefs",
    "hasExtractedLicensingInfos",
    "annotations",
    "documentDescribes",
    "packages",
    "files",
    "relationships",
    "snippets",
    "revieweds",
)


def check_version(doc1: Document, doc2: Document) -> None:
    if doc1.spdxVersion != SPDX_VERSION or doc2.spdxVersion != SPDX_VERSION:
        raise VersionMismatch(doc1.spdxVersion, doc2.spdxVersion, SPDX_VERSION)


def merge_creation_info(info1: CreationInfo, info2: CreationInfo) -> CreationInfo:
    creators = combine(info1.creators, info2.creators) | {PROVENANCE_CREATOR}
    return CreationInfo(
        created=datetime.now(timezone.utc).replace(microsecond=0),
        creators=creators,
        licenseListVersion=combine_optional(info1.licenseListVersion, info2.licenseListVersion),
        comment=combine_optional(info1.comment, info2.comment),
    )


def warn_divergent_elements(
    kind: str,
    elements1: Optional[AbstractSet],
    elements2: Optional[AbstractSet]
) -> None:
    if not elements1 or not elements2:
        return
    by_id = {}
    for element in elements1:
        by_id.setdefault(element.SPDXID, set()).add(element)
    for element in elements2:
        known = by_id.get(element.SPDXID)
        if known and element not in known:
            warnings.warn(
                f"{kind} {element.SPDXID} has different content in two SBOMs, both are kept",
                UserWarning
            )


def count(elements: Optional[Iterable]) -> int:
    return len(elements) if elements else 0


def merge(doc1: Document, doc2: Document) -> Document:
    """
    Merge two SPDX 2.3 documents into a new one.

    Raises VersionMismatch before touching any field if either document does
    not declare SPDX_VERSION. Elements are deduplicated by full structural
    equality, so two packages sharing an SPDXID but differing in any field are
    both retained. The merged creators always include PROVENANCE_CREATOR.
    """
    check_version(doc1, doc2)
    logging.info(f"Merging {doc1.name} and {doc2.name}...")

    warn_divergent_elements("Package", doc1.packages, doc2.packages)
    warn_divergent_elements("File", doc1.files, doc2.files)
    warn_divergent_elements("Snippet", doc1.snippets, doc2.snippets)

    collections = {
        field: combine_optional(getattr(doc1, field), getattr(doc2, field))
        for field in OPTIONAL_COLLECTIONS
    }
    merged = Document(
        SPDXID=doc1.SPDXID,
        spdxVersion=SPDX_VERSION,
        dataLicense=combine(doc1.dataLicense, doc2.dataLicense) or DATA_LICENSE,
        documentNamespace=combine(doc1.documentNamespace, doc2.documentNamespace),
        name=concatenate(doc1.name, doc2.name),
        creationInfo=merge_creation_info(doc1.creationInfo, doc2.creationInfo),
        comment=combine_optional(doc1.comment, doc2.comment),
        **collections,
    )

    logging.info(
        f"Merged SBOM {merged.name}: {count(merged.packages)} packages, "
        f"{count(merged.files)} files, {count(merged.snippets)} snippets, "
        f"{count(merged.relationships)} relationships"
    )
    return merged


class Merge_SBOM:
    def __init__(self, input: List[str]) -> None:
        if len(input) != 2:
            raise ValueError(f"Exactly two SBOMs are needed for merging, got {len(input)}")
        self.input = input

    def merge_sbom(self) -> Document:
        root_doc = Util.load_document(self.input[0])
        sub_doc = Util.load_document(self.input[1])
        return merge(root_doc, sub_doc)
