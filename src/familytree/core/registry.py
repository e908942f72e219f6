from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from familytree.core.models.member import Member, Gender
from familytree.core.models.sample_data import EXAMPLES
from familytree.core.structures.avl_tree import AVLTree


@dataclass
class TreeStatistics:
    total: int = 0
    height: int = 0
    max_level: int = 0
    mean_level: float = 0.0
    males: int = 0
    females: int = 0
    root_balance: int = 0


class FamilyRegistry:
    """
    Fachada da árvore genealógica.
    Centraliza o índice AVL, a geração de IDs e o registro de mensagens
    usados pelo menu.
    """
    FIRST_AUTO_ID = 1000
    MAX_LOGS = 50

    def __init__(self):
        self.tree = AVLTree()
        self.next_id = self.FIRST_AUTO_ID
        self.logs: List[str] = []

    def register(self, name: str, birth_date: str, gender: Optional[str] = None, level: int = 0) -> Member:
        """Cria um membro com ID sequencial (a partir de 1000) e o insere."""
        while self.next_id in self.tree:
            self.next_id += 1
        member = Member(self.next_id, name, birth_date, gender, level)
        self.next_id += 1
        self.tree.insert(member.id, member)
        self.log(f"[Registro] Membro inserido com ID {member.id}: {member.name}")
        return member

    def add_member(self, member: Member) -> bool:
        """Insere um membro com ID informado. Retorna False se o ID já existir."""
        if self.tree.lookup(member.id) is not None:
            self.log(f"[Registro] ID {member.id} já existe. Inserção ignorada.")
            return False
        self.tree.insert(member.id, member)
        self.log(f"[Registro] Membro inserido com ID {member.id}: {member.name}")
        return True

    def find(self, member_id: int) -> Optional[Member]:
        return self.tree.lookup(member_id)

    def remove(self, member_id: int) -> bool:
        if member_id not in self.tree:
            self.log(f"[Registro] Membro {member_id} não encontrado.")
            return False
        self.tree.delete(member_id)
        self.log(f"[Registro] Membro {member_id} removido.")
        return True

    def relatives(self, member_id: int) -> Optional[Tuple[Optional[Member], List[Member]]]:
        return self.tree.relatives(member_id)

    def load_example(self, name: str) -> int:
        """
        Carrega um dos conjuntos de exemplo ("ankarai" ou "fundadores").
        Retorna quantos membros novos foram inseridos.
        """
        if name not in EXAMPLES:
            raise KeyError(f"Exemplo desconhecido: {name!r}. Disponíveis: {', '.join(EXAMPLES)}")

        count = 0
        for member in EXAMPLES[name]:
            if member.id not in self.tree:
                self.tree.insert(member.id, member)
                count += 1
        self.log(f"Árvore de exemplo '{name}' carregada: {count} membros.")
        return count

    def statistics(self) -> TreeStatistics:
        if self.tree.is_empty():
            return TreeStatistics()

        members = list(self.tree.in_order())
        levels = np.array([m.level for m in members])
        genders = Counter(m.gender for m in members)

        return TreeStatistics(
            total=len(members),
            height=self.tree.height(),
            max_level=int(levels.max()),
            mean_level=float(levels.mean()),
            males=genders[Gender.MALE],
            females=genders[Gender.FEMALE],
            root_balance=self.tree.root_balance(),
        )

    def log(self, msg: str):
        print(msg)
        self.logs.append(msg)
        # Mantém apenas as últimas mensagens em memória
        if len(self.logs) > self.MAX_LOGS:
            self.logs.pop(0)
