"""Newline-delimited JSON-RPC over stdin/stdout."""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Callable
from typing import Any

import structlog

from core.protocol import INVALID_REQUEST, PARSE_ERROR, error_response, handle_payload
from core.server import ToolServer

logger = structlog.get_logger()

# Chat histories and embedding batches can make single frames large
_STREAM_LIMIT = 16 * 1024 * 1024

Writer = Callable[[str], None]


def _write_stdout(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


async def _stdin_reader() -> asyncio.StreamReader:
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=_STREAM_LIMIT)
    protocol = asyncio.StreamReaderProtocol(reader)
    await loop.connect_read_pipe(lambda: protocol, sys.stdin)
    return reader


async def _handle_line(server: ToolServer, line: bytes, write: Writer) -> None:
    try:
        payload: Any = json.loads(line)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("stdio_frame_invalid", error=str(e))
        write(json.dumps(error_response(None, PARSE_ERROR, "Parse error")))
        return

    response = await handle_payload(server, payload)
    if response is not None:
        write(json.dumps(response, ensure_ascii=False))


async def serve_stdio(
    server: ToolServer,
    reader: asyncio.StreamReader | None = None,
    write: Writer | None = None,
) -> None:
    """Serve until stdin closes. Each frame is handled in its own task."""
    if reader is None:
        reader = await _stdin_reader()
    if write is None:
        write = _write_stdout

    logger.info("stdio_ready", server=server.name, tools=len(server.registry))
    pending: set[asyncio.Task] = set()
    while True:
        try:
            line = await reader.readline()
        except ValueError as e:
            # Oversized frame; the reader has already dropped it
            logger.warning("stdio_frame_too_large", error=str(e))
            write(json.dumps(error_response(None, INVALID_REQUEST, "Frame exceeds size limit")))
            continue
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        task = asyncio.create_task(_handle_line(server, line, write))
        pending.add(task)
        task.add_done_callback(pending.discard)

    if pending:
        await asyncio.gather(*pending)
    logger.info("stdio_closed", server=server.name)
