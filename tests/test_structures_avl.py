import sys
import os
import math
import random

# Setup de importação
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from familytree.core.structures.avl_tree import AVLTree
from familytree.core.models.member import Member


def make_tree(keys):
    avl = AVLTree()
    for key in keys:
        avl.insert(key, Member(key, f"Membro {key}", "1900"))
    return avl


def real_height(node):
    if node is None:
        return 0
    return 1 + max(real_height(node.left), real_height(node.right))


def check_node(node, low=None, high=None):
    """Valida BST, altura armazenada e balanceamento em toda a subárvore."""
    if node is None:
        return
    assert low is None or node.key > low
    assert high is None or node.key < high
    assert node.value.id == node.key
    assert node.height == real_height(node)
    assert abs(real_height(node.left) - real_height(node.right)) <= 1
    check_node(node.left, low, node.key)
    check_node(node.right, node.key, high)


def keys_of(records):
    return [m.id for m in records]


def test_avl_balanced_insertion():
    print("--- Cenário 1: inserção já balanceada ---")
    avl = make_tree([50, 30, 70, 20, 40, 60, 80])

    assert keys_of(avl.in_order()) == [20, 30, 40, 50, 60, 70, 80]
    assert avl.root.key == 50
    assert avl.height() == 3
    check_node(avl.root)
    print(">> SUCESSO: Raiz 50 e percurso em ordem correto.")


def test_avl_ascending_insertion_rotates():
    print("--- Cenário 2: inserção crescente ---")
    avl = make_tree([10, 20, 30, 40, 50])

    # Numa BST comum a altura seria 5
    assert avl.height() == 3
    assert avl.root.key == 20
    check_node(avl.root)
    print(f">> SUCESSO: Altura {avl.height()}, raiz {avl.root.key}.")


def test_avl_delete_node_with_two_children():
    print("--- Cenário 3: remoção com dois filhos ---")
    avl = make_tree([50, 30, 70, 20, 40, 60, 80])
    old_node = avl.root.right

    avl.delete(70)

    # O sucessor (80) foi copiado para o nó que guardava o 70
    assert avl.root.right is old_node
    assert old_node.key == 80 and old_node.value.id == 80
    assert old_node.right is None
    assert old_node.left.key == 60
    assert keys_of(avl.in_order()) == [20, 30, 40, 50, 60, 80]
    assert avl.lookup(70) is None
    check_node(avl.root)


def test_avl_lookup_empty_tree():
    avl = AVLTree()
    assert avl.lookup(42) is None
    assert avl.is_empty()
    assert avl.height() == 0
    assert len(avl) == 0
    assert avl.min_key() is None
    assert avl.root_balance() == 0
    assert list(avl.in_order()) == []
    assert list(avl.by_level()) == []


def test_avl_duplicate_insert_is_noop():
    avl = AVLTree()
    first = Member(5, "Primeiro", "1900")
    avl.insert(5, first)
    avl.insert(5, Member(5, "Segundo", "2000"))

    assert avl.lookup(5) is first
    assert len(avl) == 1


def test_avl_delete_absent_key_keeps_structure():
    avl = make_tree([50, 30, 70, 20, 40])
    before_in = keys_of(avl.in_order())
    before_pre = keys_of(avl.pre_order())

    avl.delete(999)

    assert keys_of(avl.in_order()) == before_in
    assert keys_of(avl.pre_order()) == before_pre
    assert len(avl) == 5


def test_avl_delete_leaf_and_single_child():
    avl = make_tree([50, 30, 70, 20])
    avl.delete(20)  # folha
    assert keys_of(avl.in_order()) == [30, 50, 70]

    avl.insert(80, Member(80, "Membro 80", "1900"))
    avl.delete(70)  # um filho
    assert keys_of(avl.in_order()) == [30, 50, 80]
    assert avl.root.right.key == 80
    check_node(avl.root)


def test_avl_delete_triggers_rotations():
    # Remover da esquerda desbalanceia para a direita (caso Right-Left)
    avl = make_tree([20, 10, 30, 25])
    avl.delete(10)
    assert avl.root.key == 25
    assert keys_of(avl.pre_order()) == [25, 20, 30]
    check_node(avl.root)

    # Filho direito com fator 0: rotação simples na remoção
    avl = make_tree([20, 10, 30, 25, 35])
    avl.delete(10)
    assert avl.root.key == 30
    assert keys_of(avl.pre_order()) == [30, 20, 25, 35]
    check_node(avl.root)


def test_avl_traversal_orders():
    avl = make_tree([50, 30, 70, 20, 40, 60, 80])

    assert keys_of(avl.pre_order()) == [50, 30, 20, 40, 70, 60, 80]
    assert keys_of(avl.post_order()) == [20, 40, 30, 60, 80, 70, 50]

    levels = [(level, keys_of(members)) for level, members in avl.by_level()]
    assert levels == [(0, [50]), (1, [30, 70]), (2, [20, 40, 60, 80])]


def test_avl_traversal_is_snapshot():
    avl = make_tree([1, 2, 3])
    iterator = avl.in_order()
    avl.insert(4, Member(4, "Membro 4", "1900"))

    # O iterador antigo não vê a inserção; uma nova chamada vê
    assert keys_of(iterator) == [1, 2, 3]
    assert keys_of(avl.in_order()) == [1, 2, 3, 4]


def test_avl_relatives_follow_tree_shape():
    avl = make_tree([50, 30, 70, 20, 40])

    parent, children = avl.relatives(30)
    assert parent.id == 50
    assert keys_of(children) == [20, 40]

    parent, children = avl.relatives(50)
    assert parent is None
    assert keys_of(children) == [30, 70]

    assert avl.relatives(999) is None


def test_avl_random_operations_keep_invariants():
    print("--- Teste aleatório de invariantes ---")
    rng = random.Random(1234)
    for _ in range(50):
        avl = AVLTree()
        present = set()
        for _ in range(rng.randint(50, 300)):
            key = rng.randint(0, 200)
            if rng.random() < 0.6:
                avl.insert(key, Member(key, "x", "1900"))
                present.add(key)
            else:
                avl.delete(key)
                present.discard(key)
            check_node(avl.root)
            assert len(avl) == len(present)

        assert keys_of(avl.in_order()) == sorted(present)
    print(">> SUCESSO: Invariantes mantidas após cada operação.")


def test_avl_round_trip_to_empty():
    rng = random.Random(99)
    keys = rng.sample(range(10000), 500)
    avl = make_tree(keys)

    rng.shuffle(keys)
    for key in keys:
        avl.delete(key)

    assert avl.is_empty()
    assert len(avl) == 0
    assert avl.height() == 0


def test_avl_height_bound():
    for n in [1, 10, 100, 1000, 5000]:
        avl = make_tree(range(n))
        bound = 1.44 * math.log2(n + 2)
        print(f"  n={n:5d}: altura {avl.height()} (limite {bound:.2f})")
        assert avl.height() <= bound


if __name__ == "__main__":
    test_avl_balanced_insertion()
    test_avl_ascending_insertion_rotates()
    test_avl_random_operations_keep_invariants()
    test_avl_height_bound()
