from fastapi import FastAPI, HTTPException, Query
from typing import Optional, Literal, List
from pydantic import BaseModel, Field
from ..errors import DecodeError, EncodeError, VersionMismatch
from ..tool.merge.merge_sbom import Merge_SBOM
from ..tool.util.utils import Util


class Response(BaseModel):
    message: str = Field(
        ...,
        title="Response Message",
        description="The response message of the request"
    )
    sbom: Optional[dict] = Field(
        None,
        title="Software Bill of Materials",
        description="The merged SPDX 2.3 document"
    )
    hash: Optional[str] = Field(
        None,
        title="SHA256 Hash",
        description="The SHA256 hash value of the SBOM file"
    )


app = FastAPI(title="SPDX Merge Tool")


@app.get("/merge", status_code=200)
def merge_sbom(
    input: List[str] = Query(..., min_length=2, max_length=2),
    output: Optional[str] = Query(None),
    format: Literal["json", "yaml"] = Query("json"),
) -> Response:
    if output == "-":
        raise HTTPException(status_code=422, detail="output must be a file path, the SBOM is returned in the response")

    res = Response(message="SBOM merged successfully! ")
    try:
        bom = Merge_SBOM(input).merge_sbom()
        if output:
            res.hash = Util.make_output(bom, output, format)
            res.message += f"Save SBOM to {output}"
    except (DecodeError, VersionMismatch, EncodeError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    res.sbom = Util.to_dict(bom)
    return res
