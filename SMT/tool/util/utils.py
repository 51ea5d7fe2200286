from typing import Literal, Optional, Union
import json
import hashlib
import logging
import yaml
import pydantic
from pydantic_core import PydanticSerializationError
from packageurl import PackageURL
from ...errors import DecodeError, EncodeError
from ...schema.spdx_model import Document


class Util:
    @staticmethod
    def parse_document(content: Union[str, bytes], source: Optional[str] = None) -> Document:
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"SBOM is not valid UTF-8: {e.reason} at byte {e.start}", source) from e
        try:
            doc = Document.model_validate_json(content)
        except pydantic.ValidationError as e:
            raise DecodeError(str(e), source) from e
        Util.check_purls(doc)
        return doc

    @staticmethod
    def load_document(path: str) -> Document:
        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise DecodeError(f"Cannot read SBOM: {e.strerror}", path) from e
        return Util.parse_document(content, path)

    @staticmethod
    def check_purls(doc: Document) -> None:
        if not doc.packages:
            return
        for pkg in doc.packages:
            if not pkg.externalRefs:
                continue
            for ref in pkg.externalRefs:
                if ref.referenceType != "purl":
                    continue
                try:
                    PackageURL.from_string(ref.referenceLocator)
                except ValueError:
                    logging.warning(f"Package {pkg.SPDXID} has an invalid purl: {ref.referenceLocator}")

    @staticmethod
    def to_dict(doc: Document) -> dict:
        try:
            return doc.model_dump(mode='json', by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodeError(f"Cannot serialize SBOM {doc.name}: {e}") from e

    @staticmethod
    def dump_document(doc: Document, fileformat: Literal["json", "yaml"] = "json") -> str:
        bom_dict = Util.to_dict(doc)
        if fileformat == "json":
            return json.dumps(bom_dict, indent=4, ensure_ascii=False)
        elif fileformat == "yaml":
            return yaml.safe_dump(bom_dict, sort_keys=False, allow_unicode=True)
        else:
            raise EncodeError(f"Unsupported output format {fileformat}")

    @staticmethod
    def toHash(path: str) -> str:
        algo = hashlib.sha256()
        with open(path, "rb") as f:
            algo.update(f.read())
        sbom_hash = algo.hexdigest()
        return sbom_hash

    @staticmethod
    def make_output(
        doc: Document,
        output: str = "-",
        fileformat: Literal["json", "yaml"] = "json"
    ) -> Optional[str]:
        content = Util.dump_document(doc, fileformat)

        if output == "-":
            print(content)
            return None

        try:
            with open(output, "w", encoding="utf-8") as fw:
                fw.write(content)
                fw.write("\n")
            bom_hash = Util.toHash(output)
            with open(output + ".sha256", "w") as fw:
                fw.write(f"sha256: {bom_hash}")
        except OSError as e:
            raise EncodeError(f"Cannot write SBOM to {output}: {e.strerror}") from e
        logging.info(f"Save SBOM to {output}")
        return bom_hash
