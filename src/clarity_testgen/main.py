import os
import shutil
import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, File, HTTPException, UploadFile
from pydantic import BaseModel

from .config import GeneratorConfig
from .contract import FunctionSignature, build_contract
from .errors import GenerationError
from .utils.test_generator import generate_deps
from .utils.test_writer import generate_module

logger = logging.getLogger('clarity_test')

app = FastAPI()

UPLOAD_DIR = os.environ.get("UPLOAD_DIR", "/app/input")


class FunctionModel(BaseModel):
    name: str
    access: str = "public"
    args: int = 0


class GenerateRequest(BaseModel):
    contract_id: str
    source: str
    functions: Optional[List[FunctionModel]] = None


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/upload")
async def upload_file(file: UploadFile = File(...)):
    filename = os.path.basename(file.filename or "")
    if not filename.endswith(".clar"):
        raise HTTPException(status_code=400, detail="Only .clar contract files are accepted")
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    file_location = os.path.join(UPLOAD_DIR, filename)
    with open(file_location, "wb") as f:
        shutil.copyfileobj(file.file, f)
    logger.info(f"📥 Stored {filename}")
    return {"filename": filename, "status": "success"}


@app.post("/generate")
async def generate(request: GenerateRequest):
    if "." not in request.contract_id:
        raise HTTPException(status_code=400, detail="contract_id must be <address>.<contract-name>")
    functions = None
    if request.functions is not None:
        functions = [FunctionSignature(f.name, f.access, f.args) for f in request.functions]
    contract = build_contract(request.contract_id, request.source, functions)
    try:
        code = generate_module(contract, GeneratorConfig.from_env())
    except GenerationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"filename": f"{contract.name}.py", "code": code}


@app.get("/deps")
async def deps():
    config = GeneratorConfig.from_env()
    return {"filename": f"{config.deps_module}.py", "code": generate_deps(config)}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=5000)
