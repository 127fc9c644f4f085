# trace.py
#
# Every generator in AlgoViz returns a "trace": a JSON-serialisable dict with
# the static description of the algorithm plus the ordered list of steps.
# The layout is described by trace_schema.json (see validate.py).
import uuid

from algoviz.default_styles import DEFAULT_STYLES
from algoviz.style_merger import merge_styles

TRACE_VERSION = "1.0"


def generate_id() -> str:
    """Stable identity token for an element or node, kept across every snapshot."""
    return uuid.uuid4().hex[:9]


def build_trace(algorithm_info: dict, pseudocode, variables_schema, steps, result=None,
                initial=None, styles=None):
    return {
        "trace_version": TRACE_VERSION,
        "algorithm": algorithm_info,
        "pseudocode": list(pseudocode),
        "variables_schema": list(variables_schema),
        "styles": merge_styles(DEFAULT_STYLES, styles or {}),
        "initial": initial,
        "steps": list(steps),
        "result": result or {},
    }
