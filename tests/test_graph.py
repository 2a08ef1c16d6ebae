import os

from optextract import const, graph
from optextract.extractor import State


def test_edges_cover_every_state():
    sources = {src for src, _, _ in graph.edges()}
    assert sources == {s.name for s in State if s != State.FINISHED}


def test_edges_include_errors():
    edges = graph.edges()
    assert ("NOT_STARTED", "UnexpectedOperand", "plain value") in edges
    assert ("IMPLICITLY_DISABLED", "UnexpectedOption", "option key") in edges


def test_edges_every_state_can_finish():
    finishing = {src for src, dst, _ in graph.edges() if dst == State.FINISHED.name}
    assert finishing == {s.name for s in State if s != State.FINISHED}


def test_edges_parsing_flag_and_value():
    labels = {label for src, dst, label in graph.edges() if src == dst == "PARSING"}
    assert labels == {"option key / flag", "option key / value"}


def test_build_source():
    source = graph.build().source
    for state in State:
        assert state.name in source
    assert "UnexpectedOperand" in source
    assert "UnexpectedOption" in source


def test_main_source(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["optextract-graph", "--source"])
    assert graph.main() == 0
    assert "digraph" in capsys.readouterr().out


def test_main_short_source(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["optextract-graph", "-s"])
    assert graph.main() == 0
    assert "NOT_STARTED" in capsys.readouterr().out


def test_main_renders_into_graph_dir(monkeypatch, tmp_path):
    rendered: list[str] = []
    monkeypatch.setattr(graph, "view", rendered.append)
    monkeypatch.setattr("sys.argv", ["optextract-graph"])
    monkeypatch.setenv(const.GRAPH_DIR_ENV, str(tmp_path))

    assert graph.main() == 0
    assert rendered == [os.path.join(str(tmp_path), const.GRAPH_FILE)]


def test_view_without_dot(monkeypatch, capsys, tmp_path):
    import graphviz

    def missing(self, *args, **kwargs):
        raise graphviz.ExecutableNotFound(["dot"])

    monkeypatch.setattr(graphviz.Digraph, "view", missing)
    graph.view(str(tmp_path / const.GRAPH_FILE))

    captured = capsys.readouterr()
    assert "digraph" in captured.out
    assert "dot" in captured.err
