#!/usr/bin/env python3
"""
py2cairo FastAPI Server
Provides REST API for contract translation
"""
from typing import Optional
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from py2cairo import __version__
from py2cairo.core.errors import TranspileError
from py2cairo.core.transpiler import transpile
from py2cairo.parser import ContractParser


# ============================================================================
# Request/Response Models
# ============================================================================

class TranspileRequest(BaseModel):
    source: str
    strict: bool = False


class TranspileFileRequest(BaseModel):
    file_path: str
    strict: bool = False


class TranspileResponse(BaseModel):
    success: bool
    cairo_source: Optional[str] = None
    contract: Optional[dict] = None
    error: Optional[str] = None


class AnalyzeRequest(BaseModel):
    source: str


class AnalyzeResponse(BaseModel):
    success: bool
    contract: Optional[dict] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="py2cairo API",
    description="Translate Python contract classes to Starknet Cairo",
    version=__version__
)

# Enable CORS for editor integrations
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _transpile_response(source: str, strict: bool) -> dict:
    try:
        result = transpile(source, strict=strict)
    except (SyntaxError, TranspileError) as e:
        return {
            "success": False,
            "error": str(e)
        }

    return {
        "success": True,
        "cairo_source": result["cairo_source"],
        "contract": result["contract"].to_dict()
    }


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return {
        "status": "ok",
        "version": __version__
    }


@app.post("/api/transpile", response_model=TranspileResponse)
async def transpile_source(request: TranspileRequest):
    """
    Translate Python source to Cairo.

    Example:
        POST /api/transpile
        {
            "source": "class Counter:\\n    balance: int\\n    ...",
            "strict": false
        }
    """
    return _transpile_response(request.source, request.strict)


@app.post("/api/transpile-file", response_model=TranspileResponse)
async def transpile_file(request: TranspileFileRequest):
    """
    Translate the contract class in a file.

    Example:
        POST /api/transpile-file
        {
            "file_path": "/path/to/counter.py"
        }
    """
    path = Path(request.file_path)
    if not path.exists():
        raise HTTPException(status_code=404, detail="File not found")

    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return {
            "success": False,
            "error": f"Could not read {request.file_path}: {e}"
        }

    return _transpile_response(source, request.strict)


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """
    Build the contract model only (storage, signatures, instructions).
    """
    try:
        contract = ContractParser().parse_source(request.source)
    except SyntaxError as e:
        return {
            "success": False,
            "error": str(e)
        }

    return {
        "success": True,
        "contract": contract.to_dict()
    }


# ============================================================================
# Run Server
# ============================================================================

def main():
    import uvicorn

    print("=" * 60)
    print("py2cairo API Server")
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("API docs: http://localhost:8000/docs")
    print("=" * 60)

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
