"""Upload endpoint: documents in, Mermaid concept map out.

The response body is always a diagram, including on failure, so the client
can render whatever comes back without special-casing status codes.
"""

import asyncio
import shutil
import tempfile
from pathlib import Path, PurePath

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import FormData, UploadFile as StarletteUploadFile

from conceptmap.api.deps import get_processor
from conceptmap.diagram.models import NO_FILES_DIAGRAM, SERVER_ERROR_DIAGRAM
from conceptmap.extraction.models import UploadedFile
from conceptmap.logging.logger import Log
from conceptmap.processor.processor import Processor

router = APIRouter()


@router.post("/generate", response_class=PlainTextResponse)
async def generate_diagram(
    request: Request,
    processor: Processor = Depends(get_processor),
) -> PlainTextResponse:
    form: FormData | None = None
    try:
        form = await request.form()
        uploads = [
            value
            for _, value in form.multi_items()
            if isinstance(value, StarletteUploadFile) and value.filename
        ]
        if not uploads:
            Log.warning("Generate request received without files")
            return PlainTextResponse(NO_FILES_DIAGRAM, status_code=400)

        Log.info(f"Received {len(uploads)} files: {[u.filename for u in uploads]}")
        with tempfile.TemporaryDirectory(prefix="conceptmap-upload-") as upload_dir:
            files = [
                await _spool(upload, Path(upload_dir), index)
                for index, upload in enumerate(uploads)
            ]
            diagram = await processor.process(files)
    except Exception:
        Log.exception("Diagram request failed")
        return PlainTextResponse(SERVER_ERROR_DIAGRAM, status_code=500)
    finally:
        if form is not None:
            await form.close()

    return PlainTextResponse(diagram)


async def _spool(upload: StarletteUploadFile, directory: Path, index: int) -> UploadedFile:
    """Copy an upload into the request's temporary directory."""
    name = upload.filename or f"upload-{index}"
    target = directory / f"{index}{PurePath(name).suffix.lower()}"
    await upload.seek(0)
    with target.open("wb") as out:
        await asyncio.to_thread(shutil.copyfileobj, upload.file, out)
    return UploadedFile(original_name=name, temp_path=target, size_bytes=target.stat().st_size)
