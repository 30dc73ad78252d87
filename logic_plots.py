"""
Visualization of truth tables and expression trees.

Main features:
- Heat map of a truth table with matplotlib
- Expression tree as a networkx DiGraph
- Interactive HTML export of an expression tree with pyvis
"""

from __future__ import annotations
import os
from typing import Any, Tuple

import matplotlib.pyplot as plt
import networkx as nx
from pyvis.network import Network

from boolean_expressions import Binary, Const, Expression, Unary, Var
from truth_tables import Context, Expressions, header, truth_matrix


# ---------------------------------------------------------------------------
# Truth table heat map
# ---------------------------------------------------------------------------


def plot_truth_table(
    context: Context,
    expressions: Expressions,
    title: str | None = None,
    figsize: Tuple[int, int] = (8, 6),
    show: bool = True,
) -> Any:
    """
    Plot a truth table as a 0/1 matrix using matplotlib.

    Each row is an assignment, each column a variable or an expression.

    Parameters
    ----------
    context:
        Declared variables.
    expressions:
        A single expression or a sequence of expressions.
    title:
        Optional custom plot title.
    show:
        If False, return the figure without calling ``plt.show()``.
    """
    matrix = truth_matrix(context, expressions)
    labels = header(context, expressions)

    fig = plt.figure(figsize=figsize)
    plt.imshow(matrix, aspect="auto", interpolation="nearest", vmin=0, vmax=1)
    plt.xticks(range(len(labels)), labels, rotation=45, ha="right")
    plt.xlabel("Column")
    plt.ylabel("Assignment index")

    if title is None:
        title = f"Truth table over {len(context.variables)} variables"
    plt.title(title)

    plt.colorbar(label="Value")
    plt.tight_layout()
    if show:
        plt.show()
    return fig


# ---------------------------------------------------------------------------
# Expression tree graph
# ---------------------------------------------------------------------------


def _kind(expr: Expression) -> str:
    if isinstance(expr, Const):
        return "constant"
    if isinstance(expr, Var):
        return "variable"
    if isinstance(expr, Unary):
        return "unary"
    return "binary"


def _label(expr: Expression) -> str:
    if isinstance(expr, (Unary, Binary)):
        return expr.op.symbol
    return expr.render()


def expression_graph(expression: Expression) -> nx.DiGraph:
    """Build a directed graph of an expression tree.

    Nodes are the expression objects themselves; structurally equal
    subtrees (and repeated variables) collapse to one node.
    Node attributes:
        kind: constant, variable, unary or binary
        label: operator symbol or leaf text
        text: rendering of the subtree
    Edges go from parent to child with a ``side`` attribute
    (left, right or operand).
    """
    g = nx.DiGraph()

    def visit(expr: Expression) -> Expression:
        if expr in g:
            return expr
        g.add_node(expr, kind=_kind(expr), label=_label(expr), text=expr.render())
        if isinstance(expr, Unary):
            g.add_edge(expr, visit(expr.operand), side="operand")
        elif isinstance(expr, Binary):
            g.add_edge(expr, visit(expr.left), side="left")
            g.add_edge(expr, visit(expr.right), side="right")
        return expr

    visit(expression)
    return g


def export_expression_html(
    expression: Expression,
    output_file: str = "expression_tree.html",
    height: str = "600px",
    width: str = "100%",
    notebook: bool = False,
) -> str:
    """Export an expression tree to interactive HTML using pyvis.

    Returns the path the file was written to.
    """
    g = expression_graph(expression)
    net = Network(height=height, width=width, directed=True, notebook=notebook)

    color_map = {
        "constant": "#90EE90",
        "variable": "#87CEEB",
        "unary": "#FF8C00",
        "binary": "#D3D3D3",
    }

    # pyvis only takes str or int node ids.
    ids = {node: i for i, node in enumerate(g.nodes)}
    for node, data in g.nodes(data=True):
        net.add_node(
            ids[node],
            label=data["label"],
            color=color_map[data["kind"]],
            title=f"{data['text']}\nKind: {data['kind']}",
            size=20,
        )

    for source, target, data in g.edges(data=True):
        net.add_edge(ids[source], ids[target], title=data["side"], arrows="to")

    net.set_options("""
    {
      "layout": {
        "hierarchical": {
          "enabled": true,
          "direction": "UD",
          "sortMethod": "directed"
        }
      },
      "physics": {
        "enabled": false
      }
    }
    """)

    graphs_dir = "graphs"
    if os.path.dirname(output_file) == "":
        os.makedirs(graphs_dir, exist_ok=True)
        output_file = os.path.join(graphs_dir, output_file)

    net.save_graph(output_file)
    print(f"Interactive graph saved to {output_file}")
    return output_file
