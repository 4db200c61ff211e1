from langgraph.graph import END, StateGraph

from pipeline.nodes import check_upload, format_response, node_detect
from pipeline.state import DETECTING, LabelState


def should_detect(state: LabelState) -> str:
    """Router: only requests that carried a file reach the vision service."""
    if state.get("stage") == DETECTING:
        return "detect"
    return "end"


def build_graph():
    workflow = StateGraph(LabelState)

    workflow.add_node("check_upload", check_upload)
    workflow.add_node("detect", node_detect)
    workflow.add_node("format_response", format_response)

    workflow.set_entry_point("check_upload")

    workflow.add_conditional_edges(
        "check_upload",
        should_detect,
        {
            "detect": "detect",
            "end": END,
        },
    )

    workflow.add_edge("detect", "format_response")
    workflow.add_edge("format_response", END)

    return workflow.compile()


pipeline = build_graph()
