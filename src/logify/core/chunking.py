from __future__ import annotations

"""
Oversized message splitting.

Keeps every emitted line under the configured cap without dropping text:
existing newlines are hard boundaries, and each segment between them is
cut into fixed-size pieces.
"""

from typing import List

from logify.domain.config import MAX_LOG_LENGTH


def split_message(message: str, max_length: int = MAX_LOG_LENGTH) -> List[str]:
    """
    Split a message into dispatchable chunks.

    Messages shorter than the cap are returned untouched as a single chunk,
    newlines included.

    Args:
        message: Fully assembled message body.
        max_length: Maximum characters per chunk.

    Returns:
        List[str]: Chunks in emission order.
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")
    if len(message) < max_length:
        return [message]

    chunks: List[str] = []
    i = 0
    length = len(message)
    while i < length:
        newline = message.find("\n", i)
        if newline == -1:
            newline = length
        while True:
            end = min(newline, i + max_length)
            chunks.append(message[i:end])
            i = end
            if i >= newline:
                break
        i += 1
    return chunks
