import os

import aiofiles
import aiofiles.os


async def write_to_file(fname: str | os.PathLike, contents: str | bytes) -> None:
    """Write ``contents`` to ``fname``, creating missing parent directories."""
    if parent := os.path.dirname(fname):
        await aiofiles.os.makedirs(parent, exist_ok=True)

    if isinstance(contents, str):
        async with aiofiles.open(fname, "w") as f:
            await f.write(contents)
    elif isinstance(contents, bytes):
        async with aiofiles.open(fname, "bw") as f:
            await f.write(contents)
    else:
        raise TypeError(
            f"Invalid type of contents: {type(contents)}, expected string or bytes"
        )
