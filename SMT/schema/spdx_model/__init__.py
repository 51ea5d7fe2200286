import json
from datetime import datetime
from enum import Enum
from typing import Annotated, FrozenSet, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field, WrapSerializer


SPDX_VERSION = "SPDX-2.3"
DATA_LICENSE = "CC0-1.0"

T = TypeVar("T")


def canonical_key(member) -> str:
    return json.dumps(member, sort_keys=True)


def _sorted_members(value, handler):
    # members are already JSON-compatible here, so their JSON text gives a total order
    return sorted(handler(value), key=canonical_key)


SpdxSet = Annotated[FrozenSet[T], WrapSerializer(_sorted_members, when_used="json")]


class SpdxModel(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
    )


class Algorithm(str, Enum):
    SHA1 = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    SHA3_256 = "SHA3-256"
    SHA3_384 = "SHA3-384"
    SHA3_512 = "SHA3-512"
    BLAKE2b_256 = "BLAKE2b-256"
    BLAKE2b_384 = "BLAKE2b-384"
    BLAKE2b_512 = "BLAKE2b-512"
    BLAKE3 = "BLAKE3"
    MD2 = "MD2"
    MD4 = "MD4"
    MD5 = "MD5"
    MD6 = "MD6"
    ADLER32 = "ADLER32"


class AnnotationType(str, Enum):
    REVIEW = "REVIEW"
    OTHER = "OTHER"


class FileType(str, Enum):
    SOURCE = "SOURCE"
    BINARY = "BINARY"
    ARCHIVE = "ARCHIVE"
    APPLICATION = "APPLICATION"
    AUDIO = "AUDIO"
    IMAGE = "IMAGE"
    TEXT = "TEXT"
    VIDEO = "VIDEO"
    DOCUMENTATION = "DOCUMENTATION"
    SPDX = "SPDX"
    OTHER = "OTHER"


class PrimaryPackagePurpose(str, Enum):
    APPLICATION = "APPLICATION"
    FRAMEWORK = "FRAMEWORK"
    LIBRARY = "LIBRARY"
    CONTAINER = "CONTAINER"
    OPERATING_SYSTEM = "OPERATING-SYSTEM"
    DEVICE = "DEVICE"
    FIRMWARE = "FIRMWARE"
    SOURCE = "SOURCE"
    ARCHIVE = "ARCHIVE"
    FILE = "FILE"
    INSTALL = "INSTALL"
    OTHER = "OTHER"


class ReferenceCategory(str, Enum):
    SECURITY = "SECURITY"
    PACKAGE_MANAGER = "PACKAGE-MANAGER"
    PACKAGE_MANAGER_LEGACY = "PACKAGE_MANAGER"
    PERSISTENT_ID = "PERSISTENT-ID"
    PERSISTENT_ID_LEGACY = "PERSISTENT_ID"
    OTHER = "OTHER"


class RelationshipType(str, Enum):
    DESCRIBES = "DESCRIBES"
    DESCRIBED_BY = "DESCRIBED_BY"
    CONTAINS = "CONTAINS"
    CONTAINED_BY = "CONTAINED_BY"
    DEPENDS_ON = "DEPENDS_ON"
    DEPENDENCY_OF = "DEPENDENCY_OF"
    DEPENDENCY_MANIFEST_OF = "DEPENDENCY_MANIFEST_OF"
    BUILD_DEPENDENCY_OF = "BUILD_DEPENDENCY_OF"
    DEV_DEPENDENCY_OF = "DEV_DEPENDENCY_OF"
    OPTIONAL_DEPENDENCY_OF = "OPTIONAL_DEPENDENCY_OF"
    PROVIDED_DEPENDENCY_OF = "PROVIDED_DEPENDENCY_OF"
    TEST_DEPENDENCY_OF = "TEST_DEPENDENCY_OF"
    RUNTIME_DEPENDENCY_OF = "RUNTIME_DEPENDENCY_OF"
    EXAMPLE_OF = "EXAMPLE_OF"
    GENERATES = "GENERATES"
    GENERATED_FROM = "GENERATED_FROM"
    ANCESTOR_OF = "ANCESTOR_OF"
    DESCENDANT_OF = "DESCENDANT_OF"
    VARIANT_OF = "VARIANT_OF"
    DISTRIBUTION_ARTIFACT = "DISTRIBUTION_ARTIFACT"
    PATCH_FOR = "PATCH_FOR"
    PATCH_APPLIED = "PATCH_APPLIED"
    COPY_OF = "COPY_OF"
    FILE_ADDED = "FILE_ADDED"
    FILE_DELETED = "FILE_DELETED"
    FILE_MODIFIED = "FILE_MODIFIED"
    EXPANDED_FROM_ARCHIVE = "EXPANDED_FROM_ARCHIVE"
    DYNAMIC_LINK = "DYNAMIC_LINK"
    STATIC_LINK = "STATIC_LINK"
    DATA_FILE_OF = "DATA_FILE_OF"
    TEST_CASE_OF = "TEST_CASE_OF"
    BUILD_TOOL_OF = "BUILD_TOOL_OF"
    DEV_TOOL_OF = "DEV_TOOL_OF"
    TEST_OF = "TEST_OF"
    TEST_TOOL_OF = "TEST_TOOL_OF"
    DOCUMENTATION_OF = "DOCUMENTATION_OF"
    OPTIONAL_COMPONENT_OF = "OPTIONAL_COMPONENT_OF"
    METAFILE_OF = "METAFILE_OF"
    PACKAGE_OF = "PACKAGE_OF"
    AMENDS = "AMENDS"
    PREREQUISITE_FOR = "PREREQUISITE_FOR"
    HAS_PREREQUISITE = "HAS_PREREQUISITE"
    REQUIREMENT_DESCRIPTION_FOR = "REQUIREMENT_DESCRIPTION_FOR"
    SPECIFICATION_FOR = "SPECIFICATION_FOR"
    OTHER = "OTHER"


class Checksum(SpdxModel):
    algorithm: Algorithm = Field(
        Algorithm.SHA1,
        title="Algorithm",
        description="Identifies the algorithm used to produce the subject Checksum."
    )
    checksumValue: str = Field(
        "",
        title="Checksum Value",
        description="The result of applying the hash algorithm, lower case hexadecimal."
    )


class CreationInfo(SpdxModel):
    created: datetime = Field(
        ...,
        title="Created",
        description="When the document was created, in UTC."
    )
    creators: SpdxSet[str] = Field(
        frozenset(),
        title="Creators",
        description="The persons, organizations and tools that created the document."
    )
    licenseListVersion: Optional[str] = Field(
        None,
        title="License List Version",
        description="The version of the SPDX License List used when the document was created."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Free form comment on the creation of the document."
    )


class ExternalRef(SpdxModel):
    referenceCategory: ReferenceCategory = Field(
        ReferenceCategory.OTHER,
        title="Reference Category",
        description="Category for the external reference."
    )
    referenceType: str = Field(
        "",
        title="Reference Type",
        description="Type of the external reference, e.g. purl or cpe23Type."
    )
    referenceLocator: str = Field(
        "",
        title="Reference Locator",
        description="The unique string with no spaces necessary to access the package-specific information."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Context about the external reference."
    )


class ExternalDocumentRef(SpdxModel):
    externalDocumentId: str = Field(
        "",
        title="External Document ID",
        description="Identifier for the external document, prefixed with DocumentRef-."
    )
    checksum: Checksum = Field(
        Checksum(),
        title="Checksum",
        description="Checksum of the external SPDX document."
    )
    spdxDocument: str = Field(
        "",
        title="SPDX Document",
        description="The document namespace of the referenced SPDX document."
    )


class CrossRef(SpdxModel):
    url: str = Field(
        "",
        title="URL",
        description="URL to a license or other related document."
    )
    isLive: Optional[bool] = Field(
        None,
        title="Is Live",
        description="Whether the URL was live when last checked."
    )
    isValid: Optional[bool] = Field(
        None,
        title="Is Valid",
        description="Whether the URL was valid when last checked."
    )
    isWayBackLink: Optional[bool] = Field(
        None,
        title="Is WayBack Link",
        description="Whether the URL points to the Internet Archive."
    )
    match: Optional[str] = Field(
        None,
        title="Match",
        description="Status of a license text match against the URL content."
    )
    order: Optional[int] = Field(
        None,
        title="Order",
        description="Order of the URL among the cross references."
    )
    timestamp: Optional[str] = Field(
        None,
        title="Timestamp",
        description="When the URL was last checked."
    )


class ExtractedLicensingInfo(SpdxModel):
    licenseId: str = Field(
        "",
        title="License ID",
        description="Local identifier of the license, prefixed with LicenseRef-."
    )
    extractedText: str = Field(
        "",
        title="Extracted Text",
        description="Verbatim license or licensing notice text."
    )
    name: Optional[str] = Field(
        None,
        title="Name",
        description="Common name of the license."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Comment on the extracted license."
    )
    seeAlsos: Optional[SpdxSet[str]] = Field(
        None,
        title="See Also",
        description="Pointers to the license outside the document."
    )
    crossRefs: Optional[SpdxSet[CrossRef]] = Field(
        None,
        title="Cross References",
        description="Cross references with the license text, with liveness details."
    )


class Annotation(SpdxModel):
    annotationDate: str = Field(
        "",
        title="Annotation Date",
        description="When the annotation was made."
    )
    annotationType: AnnotationType = Field(
        AnnotationType.OTHER,
        title="Annotation Type",
        description="Type of the annotation."
    )
    annotator: str = Field(
        "",
        title="Annotator",
        description="The person, organization or tool that made the annotation."
    )
    comment: str = Field(
        "",
        title="Comment",
        description="The annotation text."
    )


class Review(SpdxModel):
    reviewDate: str = Field(
        "",
        title="Review Date",
        description="When the review was made."
    )
    reviewer: Optional[str] = Field(
        None,
        title="Reviewer",
        description="The person, organization or tool that reviewed the document."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Comment of the reviewer."
    )


class PackageVerificationCode(SpdxModel):
    packageVerificationCodeValue: str = Field(
        "",
        title="Verification Code Value",
        description="The SHA1 of the sorted SHA1s of the package files."
    )
    packageVerificationCodeExcludedFiles: Optional[SpdxSet[str]] = Field(
        None,
        title="Excluded Files",
        description="Files excluded from the verification code."
    )


class Package(SpdxModel):
    SPDXID: str = Field(
        "",
        title="SPDX ID",
        description="Identifier of the package within the document."
    )
    name: str = Field(
        "",
        title="Name",
        description="Full name of the package."
    )
    downloadLocation: str = Field(
        "",
        title="Download Location",
        description="Where the package can be downloaded, or NONE/NOASSERTION."
    )
    filesAnalyzed: bool = Field(
        False,
        title="Files Analyzed",
        description="Whether the package files were analyzed."
    )
    versionInfo: Optional[str] = Field(
        None,
        title="Version",
        description="Version of the package."
    )
    packageFileName: Optional[str] = Field(
        None,
        title="Package File Name",
        description="Actual file name of the package."
    )
    supplier: Optional[str] = Field(
        None,
        title="Supplier",
        description="Distributor of the package."
    )
    originator: Optional[str] = Field(
        None,
        title="Originator",
        description="Where the package originally came from."
    )
    packageVerificationCode: Optional[PackageVerificationCode] = Field(
        None,
        title="Package Verification Code",
        description="Verification code over the package files."
    )
    checksums: Optional[SpdxSet[Checksum]] = Field(
        None,
        title="Checksums",
        description="Checksums of the package."
    )
    homepage: Optional[str] = Field(
        None,
        title="Homepage",
        description="Home page of the package."
    )
    sourceInfo: Optional[str] = Field(
        None,
        title="Source Information",
        description="Background information on the origin of the package."
    )
    licenseConcluded: Optional[str] = Field(
        None,
        title="Concluded License",
        description="License concluded by the document creator."
    )
    licenseInfoFromFiles: Optional[SpdxSet[str]] = Field(
        None,
        title="License Information From Files",
        description="Licenses found in the package files."
    )
    licenseDeclared: Optional[str] = Field(
        None,
        title="Declared License",
        description="License declared by the package authors."
    )
    licenseComments: Optional[str] = Field(
        None,
        title="License Comments",
        description="Background on how the concluded license was determined."
    )
    copyrightText: Optional[str] = Field(
        None,
        title="Copyright Text",
        description="Copyright holders of the package."
    )
    summary: Optional[str] = Field(
        None,
        title="Summary",
        description="Short description of the package."
    )
    description: Optional[str] = Field(
        None,
        title="Description",
        description="Detailed description of the package."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Comment on the package."
    )
    externalRefs: Optional[SpdxSet[ExternalRef]] = Field(
        None,
        title="External References",
        description="References to information about the package outside the document."
    )
    attributionTexts: Optional[SpdxSet[str]] = Field(
        None,
        title="Attribution Texts",
        description="Acknowledgements that may be required to be communicated."
    )
    primaryPackagePurpose: Optional[PrimaryPackagePurpose] = Field(
        None,
        title="Primary Package Purpose",
        description="Primary purpose of the package."
    )
    releaseDate: Optional[str] = Field(
        None,
        title="Release Date",
        description="When the package was released."
    )
    builtDate: Optional[str] = Field(
        None,
        title="Built Date",
        description="When the package was built."
    )
    validUntilDate: Optional[str] = Field(
        None,
        title="Valid Until Date",
        description="End of support date of the package."
    )
    annotations: Optional[SpdxSet[Annotation]] = Field(
        None,
        title="Annotations",
        description="Annotations on the package."
    )
    hasFiles: Optional[SpdxSet[str]] = Field(
        None,
        title="Has Files",
        description="Identifiers of the files contained in the package."
    )


class ArtifactOf(SpdxModel):
    name: str = Field(
        "",
        title="Name",
        description="Name of the project the file is an artifact of."
    )
    homePage: Optional[str] = Field(
        None,
        title="Home Page",
        description="Home page of the project."
    )
    projectUri: Optional[str] = Field(
        None,
        title="Project URI",
        description="URI of the project in the DOAP format."
    )


class File(SpdxModel):
    SPDXID: str = Field(
        "",
        title="SPDX ID",
        description="Identifier of the file within the document."
    )
    fileName: str = Field(
        "",
        title="File Name",
        description="Relative path of the file."
    )
    checksums: SpdxSet[Checksum] = Field(
        frozenset(),
        title="Checksums",
        description="Checksums of the file."
    )
    fileTypes: Optional[SpdxSet[FileType]] = Field(
        None,
        title="File Types",
        description="Types of the file."
    )
    licenseConcluded: Optional[str] = Field(
        None,
        title="Concluded License",
        description="License concluded by the document creator."
    )
    licenseInfoInFiles: Optional[SpdxSet[str]] = Field(
        None,
        title="License Information In File",
        description="Licenses found in the file."
    )
    licenseComments: Optional[str] = Field(
        None,
        title="License Comments",
        description="Background on how the concluded license was determined."
    )
    copyrightText: Optional[str] = Field(
        None,
        title="Copyright Text",
        description="Copyright holders of the file."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Comment on the file."
    )
    noticeText: Optional[str] = Field(
        None,
        title="Notice Text",
        description="Notices found in the file."
    )
    fileContributors: Optional[SpdxSet[str]] = Field(
        None,
        title="File Contributors",
        description="Contributors to the file."
    )
    attributionTexts: Optional[SpdxSet[str]] = Field(
        None,
        title="Attribution Texts",
        description="Acknowledgements that may be required to be communicated."
    )
    fileDependencies: Optional[SpdxSet[str]] = Field(
        None,
        title="File Dependencies",
        description="Deprecated: identifiers of files this file depends on."
    )
    artifactOfs: Optional[SpdxSet[ArtifactOf]] = Field(
        None,
        title="Artifact Of",
        description="Deprecated: projects the file is an artifact of."
    )
    annotations: Optional[SpdxSet[Annotation]] = Field(
        None,
        title="Annotations",
        description="Annotations on the file."
    )


class StartEndPointer(SpdxModel):
    reference: str = Field(
        "",
        title="Reference",
        description="Identifier of the file the pointer refers to."
    )
    offset: Optional[int] = Field(
        None,
        title="Offset",
        description="Byte offset in the file."
    )
    lineNumber: Optional[int] = Field(
        None,
        title="Line Number",
        description="Line number in the file."
    )


class SnippetRange(SpdxModel):
    startPointer: StartEndPointer = Field(
        StartEndPointer(),
        title="Start Pointer",
        description="Start of the snippet."
    )
    endPointer: StartEndPointer = Field(
        StartEndPointer(),
        title="End Pointer",
        description="End of the snippet."
    )


class Snippet(SpdxModel):
    SPDXID: str = Field(
        "",
        title="SPDX ID",
        description="Identifier of the snippet within the document."
    )
    snippetFromFile: str = Field(
        "",
        title="Snippet From File",
        description="Identifier of the file containing the snippet."
    )
    ranges: SpdxSet[SnippetRange] = Field(
        frozenset(),
        title="Ranges",
        description="Byte and line ranges of the snippet."
    )
    name: Optional[str] = Field(
        None,
        title="Name",
        description="Name of the snippet."
    )
    licenseConcluded: Optional[str] = Field(
        None,
        title="Concluded License",
        description="License concluded by the document creator."
    )
    licenseInfoInSnippets: Optional[SpdxSet[str]] = Field(
        None,
        title="License Information In Snippet",
        description="Licenses found in the snippet."
    )
    licenseComments: Optional[str] = Field(
        None,
        title="License Comments",
        description="Background on how the concluded license was determined."
    )
    copyrightText: Optional[str] = Field(
        None,
        title="Copyright Text",
        description="Copyright holders of the snippet."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Comment on the snippet."
    )
    attributionTexts: Optional[SpdxSet[str]] = Field(
        None,
        title="Attribution Texts",
        description="Acknowledgements that may be required to be communicated."
    )
    annotations: Optional[SpdxSet[Annotation]] = Field(
        None,
        title="Annotations",
        description="Annotations on the snippet."
    )


class Relationship(SpdxModel):
    spdxElementId: str = Field(
        "",
        title="SPDX Element ID",
        description="Identifier of the element the relationship starts from."
    )
    relationshipType: RelationshipType = Field(
        RelationshipType.OTHER,
        title="Relationship Type",
        description="Type of the relationship."
    )
    relatedSpdxElement: str = Field(
        "",
        title="Related SPDX Element",
        description="Identifier of the element the relationship points to."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Comment on the relationship."
    )


class Document(SpdxModel):
    SPDXID: str = Field(
        "SPDXRef-DOCUMENT",
        title="SPDX ID",
        description="Identifier of the document itself."
    )
    spdxVersion: str = Field(
        "",
        title="SPDX Version",
        description="Version of the SPDX specification the document conforms to."
    )
    dataLicense: str = Field(
        "",
        title="Data License",
        description="License of the document data, CC0-1.0 for conformant documents."
    )
    documentNamespace: str = Field(
        "",
        title="Document Namespace",
        description="Unique URI of the document."
    )
    name: str = Field(
        "",
        title="Name",
        description="Name of the document."
    )
    creationInfo: CreationInfo = Field(
        ...,
        title="Creation Information",
        description="Who created the document and when."
    )
    comment: Optional[str] = Field(
        None,
        title="Comment",
        description="Comment on the document."
    )
    externalDocumentRefs: Optional[SpdxSet[ExternalDocumentRef]] = Field(
        None,
        title="External Document References",
        description="Other SPDX documents referenced by this document."
    )
    hasExtractedLicensingInfos: Optional[SpdxSet[ExtractedLicensingInfo]] = Field(
        None,
        title="Extracted Licensing Information",
        description="Licenses that are not on the SPDX License List."
    )
    annotations: Optional[SpdxSet[Annotation]] = Field(
        None,
        title="Annotations",
        description="Annotations on the document."
    )
    documentDescribes: Optional[SpdxSet[str]] = Field(
        None,
        title="Document Describes",
        description="Identifiers of the elements the document describes."
    )
    packages: Optional[SpdxSet[Package]] = Field(
        None,
        title="Packages",
        description="Packages described by the document."
    )
    files: Optional[SpdxSet[File]] = Field(
        None,
        title="Files",
        description="Files described by the document."
    )
    snippets: Optional[SpdxSet[Snippet]] = Field(
        None,
        title="Snippets",
        description="Snippets described by the document."
    )
    relationships: Optional[SpdxSet[Relationship]] = Field(
        None,
        title="Relationships",
        description="Relationships between elements of the document."
    )
    revieweds: Optional[SpdxSet[Review]] = Field(
        None,
        title="Reviews",
        description="Deprecated: reviews of the document."
    )
