from dataclasses import dataclass
from typing import Optional


class Gender:
    MALE = "M"
    FEMALE = "F"
    ALL = (MALE, FEMALE)


@dataclass(frozen=True)
class Member:
    """
    Membro da árvore genealógica.
    O 'id' é a chave única usada pelo índice AVL; os demais campos são
    apenas carga útil para exibição.
    """
    id: int
    name: str
    birth_date: str
    gender: Optional[str] = None
    level: int = 0  # Geração (0 = fundador)

    def __post_init__(self):
        if self.gender is not None and self.gender not in Gender.ALL:
            raise ValueError(f"Gênero inválido: {self.gender!r} (use M ou F).")
        if self.level < 0:
            raise ValueError("O nível genealógico não pode ser negativo.")

    def describe(self) -> str:
        """Linha formatada usada pelos percursos e pela busca."""
        text = f"ID: {self.id:>4} | {self.name:<20} | Nivel: {self.level:>2} | Nasc: {self.birth_date}"
        if self.gender:
            text += f" | Genero: {self.gender}"
        return text

    def __repr__(self):
        return f"{self.name}({self.id})"
