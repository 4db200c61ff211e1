from typing import List, Optional, TypedDict

from vision.schemas import LabelResult, UploadedImage

AWAITING_FILE = "awaiting_file"
DETECTING = "detecting"
RENDERED = "rendered"
NO_FILE = "no_file"


class LabelState(TypedDict, total=False):
    """
    State carried through the request graph for a single upload.

    Nothing in here outlives the request.
    """

    image: Optional[UploadedImage]

    # awaiting_file -> detecting -> rendered, or no_file
    stage: str

    # Outputs from the vision service, in service order
    labels: Optional[List[LabelResult]]

    # Rendering inputs
    lines: Optional[List[str]]  # ["Cat -> 80.00%", ...]
    image_src: Optional[str]  # data:<mime>;base64,<payload>

    error: Optional[str]


def initial_state(image: Optional[UploadedImage]) -> LabelState:
    return {
        "image": image,
        "stage": AWAITING_FILE,
        "labels": None,
        "lines": None,
        "image_src": None,
        "error": None,
    }
