from collections import deque
from typing import Any, Iterator, List, Optional, Tuple


class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave (ID do membro), o valor (objeto Member) e a altura.
    """
    def __init__(self, key: int, value: Any):
        self.key = key          # ID único do membro
        self.value = value      # O registro (Member)
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial do nó é 1


class AVLTree:
    """
    Índice balanceado (Árvore AVL) dos membros da árvore genealógica.
    Garante inserção, remoção e busca em O(log n).

    Cada nó pertence apenas ao seu pai (ou à própria árvore, no caso da raiz).
    Relações pai/filhos usadas na exibição são derivadas da forma da árvore
    no momento da consulta, nunca armazenadas.
    """
    def __init__(self):
        self.root: Optional[AVLNode] = None
        self._size = 0

    # --- Operações públicas ---

    def insert(self, key: int, value: Any):
        """
        Insere um novo nó e rebalanceia a árvore automaticamente.
        Chave duplicada não altera nada (o registro original é mantido).
        """
        if self._find_node(key) is not None:
            return
        self.root = self._insert_recursive(self.root, key, value)
        self._size += 1

    def delete(self, key: int):
        """Remove o nó com a chave informada. Chave ausente não altera nada."""
        if self._find_node(key) is None:
            return
        self.root = self._delete_recursive(self.root, key)
        self._size -= 1

    def lookup(self, key: int) -> Optional[Any]:
        """Busca um membro pelo ID em O(log n). Retorna o registro ou None."""
        node = self._find_node(key)
        return node.value if node else None

    def height(self) -> int:
        return self._get_height(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def root_balance(self) -> int:
        """Fator de balanceamento da raiz (0 para árvore vazia)."""
        return self._get_balance(self.root)

    def min_key(self) -> Optional[int]:
        if not self.root:
            return None
        return self._min_node(self.root).key

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self._find_node(key) is not None

    # --- Percursos ---
    # Cada chamada tira uma "foto" da árvore naquele instante: mudanças
    # posteriores não aparecem em um iterador já devolvido.

    def in_order(self) -> Iterator[Any]:
        """Percurso em ordem: IDs em ordem crescente."""
        return iter(list(self._in_order(self.root)))

    def pre_order(self) -> Iterator[Any]:
        """Percurso pré-ordem: nó, esquerda, direita."""
        return iter(list(self._pre_order(self.root)))

    def post_order(self) -> Iterator[Any]:
        """Percurso pós-ordem: esquerda, direita, nó."""
        return iter(list(self._post_order(self.root)))

    def by_level(self) -> Iterator[Tuple[int, List[Any]]]:
        """
        Percurso em largura (BFS).
        Gera pares (nível, [registros]) com o nível 0 sendo a raiz e os
        registros de cada nível da esquerda para a direita.
        """
        levels = []
        if self.root:
            queue = deque([self.root])
            level = 0
            while queue:
                level_values = []
                for _ in range(len(queue)):
                    node = queue.popleft()
                    level_values.append(node.value)
                    if node.left:
                        queue.append(node.left)
                    if node.right:
                        queue.append(node.right)
                levels.append((level, level_values))
                level += 1
        return iter(levels)

    def relatives(self, key: int) -> Optional[Tuple[Optional[Any], List[Any]]]:
        """
        Retorna (pai, [filhos]) do nó segundo a forma atual da árvore,
        ou None se a chave não existir.
        """
        parent = None
        current = self.root
        while current:
            if key == current.key:
                children = [c.value for c in (current.left, current.right) if c]
                return (parent.value if parent else None), children
            parent = current
            current = current.left if key < current.key else current.right
        return None

    # --- Inserção e remoção recursivas ---

    def _insert_recursive(self, node: Optional[AVLNode], key: int, value: Any) -> AVLNode:
        # 1. Inserção normal de BST (Binary Search Tree)
        if not node:
            return AVLNode(key, value)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key, value)
        else:
            node.right = self._insert_recursive(node.right, key, value)

        # 2. Atualiza altura e rebalanceia cada ancestral do caminho
        return self._rebalance(node)

    def _delete_recursive(self, node: Optional[AVLNode], key: int) -> Optional[AVLNode]:
        if not node:
            return node

        if key < node.key:
            node.left = self._delete_recursive(node.left, key)
        elif key > node.key:
            node.right = self._delete_recursive(node.right, key)
        else:
            # Caso: 0 ou 1 filho -> o filho (ou nada) ocupa o lugar do nó
            if not node.left or not node.right:
                return node.left or node.right

            # Caso: 2 filhos -> copia o sucessor e o remove da subárvore direita
            successor = self._min_node(node.right)
            node.key = successor.key
            node.value = successor.value
            node.right = self._delete_recursive(node.right, successor.key)

        return self._rebalance(node)

    # --- Métodos Auxiliares e Rotações ---

    def _find_node(self, key: int) -> Optional[AVLNode]:
        current = self.root
        while current:
            if key == current.key:
                return current
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def _min_node(self, node: AVLNode) -> AVLNode:
        while node.left:
            node = node.left
        return node

    def _get_height(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _get_balance(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _update_height(self, node: AVLNode):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _rebalance(self, node: AVLNode) -> AVLNode:
        """
        Recalcula a altura do nó e aplica a rotação necessária.
        A escolha entre rotação simples e dupla olha o fator de
        balanceamento do filho (mesma tabela para inserção e remoção).
        """
        self._update_height(node)
        balance = self._get_balance(node)

        # Caso 1 - Rotação à Direita (Left-Left)
        if balance > 1 and self._get_balance(node.left) >= 0:
            return self._rotate_right(node)

        # Caso 2 - Rotação Dupla à Direita (Left-Right)
        if balance > 1:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 3 - Rotação à Esquerda (Right-Right)
        if balance < -1 and self._get_balance(node.right) <= 0:
            return self._rotate_left(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left)
        if balance < -1:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def _rotate_left(self, z: AVLNode) -> AVLNode:
        """
        Realiza rotação simples à esquerda.
        Usada quando o peso está na direita (Right-Right).
        """
        y = z.right
        T2 = y.left

        # Rotação
        y.left = z
        z.right = T2

        # Atualiza alturas (z agora é filho de y)
        self._update_height(z)
        self._update_height(y)

        return y

    def _rotate_right(self, z: AVLNode) -> AVLNode:
        """
        Realiza rotação simples à direita.
        Usada quando o peso está na esquerda (Left-Left).
        """
        y = z.left
        T3 = y.right

        y.right = z
        z.left = T3

        self._update_height(z)
        self._update_height(y)

        return y

    # --- Geradores recursivos dos percursos ---

    def _in_order(self, node: Optional[AVLNode]) -> Iterator[Any]:
        if node:
            yield from self._in_order(node.left)
            yield node.value
            yield from self._in_order(node.right)

    def _pre_order(self, node: Optional[AVLNode]) -> Iterator[Any]:
        if node:
            yield node.value
            yield from self._pre_order(node.left)
            yield from self._pre_order(node.right)

    def _post_order(self, node: Optional[AVLNode]) -> Iterator[Any]:
        if node:
            yield from self._post_order(node.left)
            yield from self._post_order(node.right)
            yield node.value
