"""
File I/O utilities
"""

import os
import uuid
from typing import Optional

from ..core.config import OUTPUT_DIR


def save_artifact(cairo_source: str,
                  base_name: Optional[str] = None,
                  output_dir: str = OUTPUT_DIR) -> str:
    """
    Save generated Cairo code to disk.

    Args:
        cairo_source: Cairo source code
        base_name: Optional base filename
        output_dir: Target directory, created if missing

    Returns:
        Path of the written .cairo file
    """
    os.makedirs(output_dir, exist_ok=True)
    base = base_name or f"contract_{uuid.uuid4().hex[:8]}"
    cairo_path = os.path.join(output_dir, f"{base}.cairo")

    with open(cairo_path, "w", encoding="utf-8") as f:
        f.write(cairo_source)

    return cairo_path
