# src/familytree/ui/console_menu.py
import sys
from typing import Callable, Optional

from familytree.core.models.member import Member
from familytree.core.models.sample_data import EXAMPLES
from familytree.core.registry import FamilyRegistry
from familytree.ui import tree_view
from familytree.ui.tree_plot import plot_tree

MENU = """
==================================================
     SISTEMA DE ARVORE GENEALOGICA
==================================================
1. Carregar arvore de exemplo
2. Inserir novo membro (ID automatico)
3. Inserir membro com ID
4. Buscar membro
5. Remover membro
6. Mostrar percurso EM ORDEM
7. Mostrar percurso PRE-ORDEM
8. Mostrar percurso POS-ORDEM
9. Mostrar por niveis
10. Mostrar esquema piramidal
11. Mostrar estrutura da arvore
12. Mostrar estatisticas
13. Salvar desenho da arvore (PNG)
0. Sair
--------------------------------------------------"""


class FamilyTreeMenu:
    """
    Menu interativo em modo texto.
    Toda a leitura/validação de campos acontece aqui; o índice AVL só recebe
    entradas já válidas.
    """
    def __init__(self, registry: Optional[FamilyRegistry] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.registry = registry or FamilyRegistry()
        self.input = input_func
        self.output = output_func

        self.actions = {
            1: self.load_example,
            2: self.insert_auto,
            3: self.insert_with_id,
            4: self.search_member,
            5: self.remove_member,
            6: lambda: self.show_traversal("EM ORDEM", self.registry.tree.in_order()),
            7: lambda: self.show_traversal("PRE-ORDEM", self.registry.tree.pre_order()),
            8: lambda: self.show_traversal("POS-ORDEM", self.registry.tree.post_order()),
            9: lambda: self.output(tree_view.format_levels(self.registry.tree)),
            10: lambda: self.output(tree_view.format_pyramid(self.registry.tree)),
            11: lambda: self.output(tree_view.format_structure(self.registry.tree)),
            12: lambda: self.output(tree_view.format_statistics(self.registry.statistics())),
            13: self.save_plot,
        }

    def run(self):
        while True:
            self.output(MENU)
            option = self.read_int("Selecione uma opcao: ")
            if option == 0:
                self.output("Programa finalizado. Ate logo!")
                return
            action = self.actions.get(option)
            if action is None:
                self.output("Opcao invalida")
                continue
            try:
                action()
            except (ValueError, KeyError) as e:
                self.output(f"Erro: {e}")

    # --- Leitura de campos ---

    def read_int(self, prompt: str) -> int:
        while True:
            raw = self.input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self.output(f"Valor invalido: {raw!r}. Digite um numero inteiro.")

    def read_gender(self) -> Optional[str]:
        raw = self.input("Genero (M/F, vazio para nao informar): ").strip().upper()
        return raw or None

    # --- Ações ---

    def load_example(self):
        self.output("Exemplos disponiveis: " + ", ".join(EXAMPLES))
        name = self.input("Nome do exemplo: ").strip().lower()
        self.registry.load_example(name)

    def insert_auto(self):
        name = self.input("Nome: ").strip()
        birth_date = self.input("Data de nascimento (AAAA-MM-DD): ").strip()
        gender = self.read_gender()
        level = self.read_int("Nivel (geracao): ")
        self.registry.register(name, birth_date, gender, level)

    def insert_with_id(self):
        member_id = self.read_int("ID numerico: ")
        name = self.input("Nome: ").strip()
        birth_date = self.input("Data de nascimento: ").strip()
        self.registry.add_member(Member(member_id, name, birth_date))

    def search_member(self):
        member_id = self.read_int("ID do membro: ")
        member = self.registry.find(member_id)
        if member is None:
            self.output("Membro nao encontrado")
            return
        self.output(tree_view.format_member_details(member, self.registry.relatives(member_id)))

    def remove_member(self):
        member_id = self.read_int("ID do membro a remover: ")
        self.registry.remove(member_id)

    def show_traversal(self, title, members):
        self.output(tree_view.format_traversal(title, members))

    def save_plot(self):
        filepath = self.input("Arquivo de saida [data/family_tree.png]: ").strip() or "data/family_tree.png"
        if plot_tree(self.registry.tree, filepath):
            self.output(f"Desenho salvo em {filepath}")
        else:
            self.output("Nada foi salvo.")


def main():
    FamilyTreeMenu().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
