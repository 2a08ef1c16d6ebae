import os
import sys
import logging

from typing import Optional

from . import const, vt100
from .extractor import ExtractorError, State, TokenClass, step

_logger = logging.getLogger(__name__)

# A representative token for each class, fed through `step` to discover the edges.
_SAMPLES = {
    TokenClass.DISABLE_MARKER: const.DISABLE_MARKER,
    TokenClass.OPTION_KEY: "--key",
    TokenClass.PLAIN_VALUE: "value",
}

_LOOKAHEADS: list[Optional[str]] = [None, "value"]


def edges() -> list[tuple[str, str, str]]:
    """
    Enumerates the transitions of the extractor as (source, target, label).

    Error cells point at a node named after the error class.
    """
    result: list[tuple[str, str, str]] = []
    for state in State:
        if state == State.FINISHED:
            continue

        for tokenClass, tok in _SAMPLES.items():
            for lookahead in _LOOKAHEADS:
                try:
                    t = step(state, tok, lookahead)
                    label = f"{tokenClass.value} / {t.effect.value}"
                    if t.consumed == 0:
                        label += " (again)"
                    edge = (state.name, t.state.name, label)
                except ExtractorError as e:
                    edge = (state.name, type(e).__name__, tokenClass.value)

                if edge not in result:
                    result.append(edge)

        result.append((state.name, State.FINISHED.name, "end of input"))

    return result


def build():
    from graphviz import Digraph  # type: ignore

    g = Digraph(const.ARGV0, filename=const.GRAPH_FILE)

    g.attr("graph", rankdir="LR", label=f"<<B>{const.ARGV0}</B> v{const.VERSION_STR}>", labelloc="t")
    g.attr("node", shape="ellipse")

    for state in State:
        shape = "doublecircle" if state == State.FINISHED else "ellipse"
        g.node(state.name, state.value, shape=shape)

    errors = set()
    for src, dst, label in edges():
        if dst not in State.__members__ and dst not in errors:
            errors.add(dst)
            g.node(dst, dst, shape="box", style="filled", fillcolor="#ffdddd", color="red")

        g.edge(src, dst, label=label, color=("red" if dst in errors else "black"))

    return g


def view(filename: str):
    from graphviz import ExecutableNotFound  # type: ignore

    g = build()
    _logger.info(f"Rendering transition graph to {filename}")
    try:
        g.view(filename=filename)
    except ExecutableNotFound:
        vt100.warning("Graphviz 'dot' executable not found, printing DOT source instead")
        print(g.source)


def main() -> int:
    args = sys.argv[1:]
    if len(args) > 0 and args[0] in ("-s", "--source"):
        print(build().source)
        return 0

    outdir = os.environ.get(const.GRAPH_DIR_ENV, os.getcwd())
    view(os.path.join(outdir, const.GRAPH_FILE))
    return 0
