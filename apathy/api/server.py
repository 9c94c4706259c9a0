from __future__ import annotations

import logging
import os.path
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from apathy import Relation, __version__
from apathy.config import load_settings
from apathy.logging import create_logger
from apathy.relations import classify

logger = logging.getLogger(__name__)

"""apathy HTTP API (FastAPI).

Endpoints:
- GET /api/health -> liveness and version
- GET /relations?subject=&other=&base= -> every relation between two paths
- GET /relations/{kind}?subject=&other=&base= -> one of descendant|ancestor|sibling|equal

Relative paths resolve against `base`, which must be absolute when given. When
omitted, AP_API_BASE_DIR is used, falling back to the server's working directory.
"""

RELATIONS = {r.value for r in Relation}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Audit log follows the AP_LOG_* settings in effect at startup
    app.state.audit = create_logger("api")
    try:
        yield
    finally:
        app.state.audit.close()


app = FastAPI(title="apathy API", version=__version__, lifespan=lifespan)


# Global safety net: log exceptions, return generic 500 without internals
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s: %s", getattr(request.url, "path", "?"), exc, exc_info=True
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


class RelationReportResp(BaseModel):
    subject: str
    other: str
    equal: bool
    descendant: bool
    ancestor: bool
    sibling: bool


class RelationResp(BaseModel):
    relation: str
    subject: str
    other: str
    result: bool


def _effective_base(base: Optional[str]) -> Optional[str]:
    if base is None:
        return load_settings().api_base_dir
    if not os.path.isabs(base):
        raise HTTPException(status_code=400, detail="base must be an absolute path")
    return base


@app.get("/api/health")
async def api_health() -> Dict[str, Any]:
    return {"status": "ok", "version": __version__}


@app.head("/api/health")
async def api_health_head() -> Response:
    return Response(status_code=200)


@app.get("/relations", response_model=RelationReportResp)
def get_relations(
    request: Request,
    subject: str = Query(...),
    other: Optional[str] = Query(default=None),
    base: Optional[str] = Query(default=None),
) -> Dict[str, Any]:
    report = classify(subject, other, base=_effective_base(base))
    request.app.state.audit.info("classify", subject=subject, other=other, result=report.to_dict())
    return report.to_dict()


@app.get("/relations/{kind}", response_model=RelationResp)
def get_relation(
    request: Request,
    kind: str,
    subject: str = Query(...),
    other: Optional[str] = Query(default=None),
    base: Optional[str] = Query(default=None),
) -> Dict[str, Any]:
    if kind not in RELATIONS:
        raise HTTPException(status_code=404, detail=f"unknown relation: {kind}")
    report = classify(subject, other, base=_effective_base(base))
    result = getattr(report, kind)
    request.app.state.audit.info(kind, subject=subject, other=other, result=result)
    return {
        "relation": kind,
        "subject": report.subject,
        "other": report.other,
        "result": result,
    }


def main() -> None:
    # Entry point for `python -m apathy.api.server`
    import uvicorn

    uvicorn.run("apathy.api.server:app", host="127.0.0.1", port=load_settings().api_port, reload=False)


if __name__ == "__main__":
    main()
