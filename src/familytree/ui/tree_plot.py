import os
from typing import Dict, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from familytree.core.structures.avl_tree import AVLTree, AVLNode


def _layout(tree: AVLTree) -> Dict[int, Tuple[float, float]]:
    """Posição de cada nó: x = índice em ordem, y = -profundidade."""
    positions: Dict[int, Tuple[float, float]] = {}

    def walk(node: AVLNode, depth: int):
        if not node:
            return
        walk(node.left, depth + 1)
        positions[node.key] = (float(len(positions)), float(-depth))
        walk(node.right, depth + 1)

    walk(tree.root, 0)
    return positions


def plot_tree(tree: AVLTree, filepath: str = "data/family_tree.png", figsize=(10, 6)) -> bool:
    """
    Desenha a forma atual da árvore e salva como imagem PNG.
    Retorna False se a árvore estiver vazia ou se não for possível salvar.
    """
    if tree.is_empty():
        return False

    positions = _layout(tree)

    fig, ax = plt.subplots(figsize=figsize)
    stack = [tree.root]
    while stack:
        node = stack.pop()
        x, y = positions[node.key]
        for child in (node.left, node.right):
            if child:
                cx, cy = positions[child.key]
                ax.plot([x, cx], [y, cy], 'k-', linewidth=1, zorder=1)
                stack.append(child)
        ax.scatter([x], [y], s=900, c='#ddffdd', edgecolors='k', zorder=2)
        ax.annotate(f"{node.value.name}\n[{node.key}]", (x, y), ha='center', va='center', fontsize=7, zorder=3)

    ax.set_title(f"Árvore Genealógica (altura {tree.height()}, {len(tree)} membros)")
    ax.axis('off')

    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(filepath)
        return True
    except OSError as e:
        print(f"[Plot Erro] Falha ao salvar {filepath}: {e}")
        return False
    finally:
        plt.close(fig)
