"""
Representações em texto da árvore genealógica.
As funções apenas montam strings; quem imprime é o menu.
"""
from typing import Iterable, List, Optional, Tuple

from familytree.core.models.member import Member
from familytree.core.registry import TreeStatistics
from familytree.core.structures.avl_tree import AVLTree, AVLNode

EMPTY_TREE_MSG = "A arvore esta vazia"


def _label(member: Member) -> str:
    return f"{member.name}({member.id})"


def format_traversal(title: str, members: Iterable[Member]) -> str:
    lines = [f"--- RECORRIDO {title} ---", "-" * 50]
    for i, member in enumerate(members, start=1):
        lines.append(f"{i}. {member.describe()}")
    if len(lines) == 2:
        lines.append(EMPTY_TREE_MSG)
    return "\n".join(lines)


def format_levels(tree: AVLTree) -> str:
    """Uma linha por geração: 'Nivel i: nome(id) nome(id) ...'."""
    if tree.is_empty():
        return EMPTY_TREE_MSG
    lines = []
    for level, members in tree.by_level():
        lines.append(f"Nivel {level}: " + " ".join(_label(m) for m in members))
    return "\n".join(lines)


def format_pyramid(tree: AVLTree, width: int = 60) -> str:
    """
    Vista piramidal: cada nível ocupa uma linha e as posições vazias
    (filhos ausentes) são preenchidas com espaço, para manter o alinhamento.
    A coluna de cada nível i tem largura width // (i + 1).
    """
    if tree.is_empty():
        return EMPTY_TREE_MSG

    rows: List[List[str]] = []
    current: List[Optional[AVLNode]] = [tree.root]
    while True:
        row = [_label(n.value) if n else " " for n in current]
        if all(cell == " " for cell in row):
            break
        rows.append(row)
        next_level = []
        for n in current:
            next_level.extend([n.left, n.right] if n else [None, None])
        current = next_level

    lines = []
    for i, row in enumerate(rows):
        col = width // (i + 1)
        lines.append("".join(f"{cell:>{col}}" for cell in row).rstrip())
    return "\n\n".join(lines)


def format_structure(tree: AVLTree) -> str:
    """Árvore 'deitada': subárvore direita em cima, 4 espaços por nível."""
    if tree.is_empty():
        return EMPTY_TREE_MSG
    lines: List[str] = []
    _structure_lines(tree.root, 0, lines)
    return "\n".join(lines)


def _structure_lines(node: Optional[AVLNode], depth: int, lines: List[str]):
    if not node:
        return
    _structure_lines(node.right, depth + 1, lines)
    lines.append(" " * (4 * depth) + f"{node.value.name} [{node.key}]")
    _structure_lines(node.left, depth + 1, lines)


def format_statistics(stats: TreeStatistics) -> str:
    if stats.total == 0:
        return EMPTY_TREE_MSG
    return "\n".join([
        f"Total de membros: {stats.total}",
        f"Altura da arvore: {stats.height}",
        f"Maximo nivel genealogico: {stats.max_level}",
        f"Nivel medio: {stats.mean_level:.2f}",
        f"Homens: {stats.males}",
        f"Mulheres: {stats.females}",
        f"Balanco da raiz: {stats.root_balance}",
    ])


def format_member_details(member: Member, relatives: Optional[Tuple[Optional[Member], List[Member]]]) -> str:
    lines = ["MEMBRO ENCONTRADO:", member.describe()]
    if relatives:
        parent, children = relatives
        if parent:
            lines.append(f"Pai: {parent.name}")
        if children:
            lines.append("Filhos: " + ", ".join(c.name for c in children))
    return "\n".join(lines)
