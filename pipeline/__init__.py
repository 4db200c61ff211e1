"""
Request pipeline for the label detection service.

Contains:
- `state`      : Typed `LabelState` definition and request stages
- `formatting` : Score, label line and data URI formatting
- `nodes`      : LangGraph node callables operating over `LabelState`
- `graph`      : StateGraph builder and compiled `pipeline`
"""
