from __future__ import annotations

import logging
import mimetypes
import sys
from pathlib import Path

from pipeline.graph import pipeline
from pipeline.state import initial_state
from vision.schemas import UploadedImage

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main() -> None:
    """
    Run a sample debug pass through the request graph.

    Sends the image at the given path (default `test.jpg`) to the vision
    service, so credentials must be configured.
    """
    path = Path(sys.argv[1] if len(sys.argv) > 1 else "test.jpg")
    mime_type, _ = mimetypes.guess_type(path.name)
    image = UploadedImage.from_bytes(path.read_bytes(), mime_type, path.name)

    # Stream: see each node's state delta live
    for step in pipeline.stream(initial_state(image)):
        node = list(step.keys())[0]
        delta = dict(step[node] or {})
        if "image_src" in delta:
            delta["image_src"] = delta["image_src"][:60] + "..."
        print("\n" + "=" * 40)
        print(f"NODE: {node}")
        print(f"DELTA: {delta}")


if __name__ == "__main__":
    main()
