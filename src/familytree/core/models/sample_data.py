"""
Conjuntos de dados de exemplo para demonstração da árvore genealógica.
"""
from typing import Dict, List

from familytree.core.models.member import Member, Gender

# Civilização ANKARAI: apenas ID, nome e ano de nascimento
ANKARAI: List[Member] = [
    Member(50, "Arkan", "1500"),
    Member(30, "Dario", "1528"),
    Member(70, "Marco", "1530"),
    Member(20, "Sara", "1550"),
    Member(40, "Talia", "1552"),
    Member(60, "Leo", "1575"),
    Member(80, "Mira", "1578"),
    Member(10, "Ana", "1580"),
    Member(25, "Elias", "1583"),
    Member(35, "Raul", "1585"),
]

# Família do fundador: registros completos com gênero e geração
FOUNDERS: List[Member] = [
    Member(50, "Fundador Principal", "1900-01-01", Gender.MALE, 0),
    Member(30, "Filho Mais Velho", "1920-03-20", Gender.MALE, 1),
    Member(70, "Filha Mais Nova", "1925-07-12", Gender.FEMALE, 1),
    Member(20, "Neto A", "1940-05-10", Gender.MALE, 2),
    Member(40, "Neta B", "1942-08-25", Gender.FEMALE, 2),
    Member(60, "Neto C", "1945-11-30", Gender.MALE, 2),
    Member(80, "Neta D", "1948-12-05", Gender.FEMALE, 2),
    Member(10, "Bisneto A", "1960-02-14", Gender.MALE, 3),
    Member(25, "Bisneta B", "1962-06-18", Gender.FEMALE, 3),
    Member(35, "Bisneto C", "1965-09-22", Gender.MALE, 3),
]

EXAMPLES: Dict[str, List[Member]] = {
    "ankarai": ANKARAI,
    "fundadores": FOUNDERS,
}
