"""Interactive text menu for editing a student roster."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections import deque
from collections.abc import Callable
from typing import TextIO

from gradebook.roster import (
    Roster,
    RosterError,
    Student,
    StudentNotFound,
    compute_average,
    format_student,
)

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_RULE = "----------------------------------------------------\n"

_MAIN_MENU = (
    "\n----------------𝐄𝐧𝐭𝐫𝐚𝐝𝐚------------------------------\n"
    "1 - Inserir Aluno. \n"
    "2 - Remover Aluno. \n"
    "3 - Consultar Aluno. \n"
    "4 - Trocar Alunos. \n"
    "5 - Imprimir Alunos. \n"
    "6 - Carregar dados. \n"
    "0 - Sair. \n" + _RULE
)

_INSERT_MENU = (
    "\n----------------Tipos de Inserção------------------\n"
    "1 - Inserir no início da lista. \n"
    "2 - Inserir no final da lista. \n"
    "3 - Inserir ordenado por matrícula. \n"
    "0 - Voltar. \n" + _RULE
)

_REMOVE_MENU = (
    "\n----------------Tipos de Remoção------------------\n"
    "1 - Remover no início da lista. \n"
    "2 - Remover no final da lista. \n"
    "3 - Remover por matrícula. \n"
    "0 - Voltar. \n" + _RULE
)

_QUERY_MENU = (
    "\n----------------Buscar Aluno------------------\n"
    "1 - Buscar pela matrícula. \n"
    "2 - Buscar pela posição. \n"
    "0 - Voltar. \n" + _RULE
)

_OBJECTIVE = (
    "\n----------------𝐎𝐛𝐣𝐞𝐭𝐢𝐯𝐨------------------------------\n"
    "O objetivo deste programa é armazenar \na matrícula e 2 notas para um dado aluno e, \n"
    "em seguida, calcular e armazenar a média.\n"
)

_OPTION_PROMPT = "Digite a opção desejada: "
_INVALID_OPTION = "Opção inválida. \n"
_NOT_NUMBERS = "Valor inválido. Os valores precisam ser números.\n"
_INVALID_REGISTRATION = "Matrícula inválida. Deve ser maior que 0. \n"
_GOING_BACK = "Voltando ao menu inicial.\n"


def list_info(size: int, empty: bool) -> str:
    """Describe the roster's size and whether it is empty."""
    return f"Tamanho: \t{size} \nLista Vazia: \t{int(empty)}\n"


def sample_students() -> list[Student]:
    """Return the fixed set of students the menu can load."""
    return [
        Student(11, 9.5, 7.8, 5.6, name="Andre Santos"),
        Student(22, 8.0, 7.5, 4.5, name="Maria Silva"),
        Student(33, 6.5, 8.2, 6.0, name="Joao Pereira"),
        Student(44, 9.0, 9.1, 7.1, name="Ana Costa"),
        Student(55, 7.5, 6.8, 4.5, name="Carlos Oliveira"),
        Student(66, 8.8, 9.0, 6.7, name="Fernanda Lima"),
        Student(77, 7.0, 7.3, 7.6, name="Paulo Souza"),
        Student(88, 8.5, 8.7, 3.4, name="Juliana Mendes"),
        Student(90, 6.9, 7.4, 5.0, name="Ricardo Alves"),
        Student(91, 9.2, 8.6, 6.0, name="Beatriz Rocha"),
    ]


def _clear_terminal() -> None:
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


class _TokenReader:
    """Reads whitespace-separated numbers from lines, leaving unparsable text pending."""

    def __init__(self, input_func: Callable[[], str]) -> None:
        self._input = input_func
        self._tokens: deque[str] = deque()

    def _peek(self) -> str:
        while not self._tokens:
            self._tokens.extend(self._input().split())
        return self._tokens[0]

    def _read(self, pattern: re.Pattern[str], convert: Callable[[str], float]):
        token = self._peek()
        match = pattern.match(token)
        if match is None:
            return None
        rest = token[match.end():]
        if rest:
            self._tokens[0] = rest
        else:
            self._tokens.popleft()
        return convert(match.group())

    def read_int(self) -> int | None:
        return self._read(_INT_PATTERN, int)

    def read_float(self) -> float | None:
        return self._read(_FLOAT_PATTERN, float)

    def discard_line(self) -> None:
        self._tokens.clear()

    def wait_line(self) -> None:
        self._input()


class Menu:
    """The interactive menu that drives a roster."""

    def __init__(
        self,
        roster: Roster | None = None,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        clear_screen: Callable[[], None] | None = None,
    ) -> None:
        self.roster = roster if roster is not None else Roster()
        self._reader = _TokenReader(input_func if input_func is not None else input)
        self._out = output if output is not None else sys.stdout
        self._clear = clear_screen if clear_screen is not None else _clear_terminal

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _prompt_int(self, prompt: str) -> int | None:
        self._write(prompt)
        return self._reader.read_int()

    def _prompt_float(self, prompt: str) -> float | None:
        self._write(prompt)
        return self._reader.read_float()

    def _read_option(self) -> int:
        self._write(_OPTION_PROMPT)
        option = self._reader.read_int()
        return -1 if option is None else option

    def _error(self, message: str) -> None:
        self._reader.discard_line()
        self._clear()
        self._write("\n----------------Erro------------------------------\n")
        self._write(message)
        self._write(_RULE)
        self._write("\nAperte <ENTER> para voltar ao menu principal.")
        self._reader.wait_line()

    def _show_roster(self) -> None:
        self._write(self.roster.format())
        self._write(list_info(len(self.roster), self.roster.is_empty()))

    def _going_back(self) -> None:
        self._clear()
        self._write(_GOING_BACK)

    def run(self) -> None:
        """Show the main menu until the user quits or input ends."""
        actions = {
            1: self.insert_student,
            2: self.remove_student,
            3: self.query_student,
            4: self.swap_students,
            5: self.print_students,
            6: self.load_data,
        }
        self._write(_OBJECTIVE)
        try:
            while True:
                self._write(_MAIN_MENU)
                option = self._read_option()
                if option == 0:
                    self._clear()
                    self._write("Programa finalizado.\n")
                    return
                action = actions.get(option)
                if action is None:
                    self._error(_INVALID_OPTION)
                else:
                    action()
        except EOFError:
            return

    def insert_student(self) -> None:
        """Read a student's data and insert it where the user chooses."""
        registration = self._prompt_int("Digite a matrícula do aluno: ")
        n1 = self._prompt_float("Digite a primeira nota do aluno: ")
        n2 = self._prompt_float("Digite a segunda nota do aluno: ")
        n3 = self._prompt_float("Digite a terceira nota do aluno: ")

        if None in (registration, n1, n2, n3):
            self._error(_NOT_NUMBERS)
            return
        if registration < 0 or not all(0 <= grade <= 10 for grade in (n1, n2, n3)):
            self._error("Valor inválido. As notas devem ser entre 0 e 10. \n")
            return

        student = compute_average(Student(registration, n1, n2, n3))
        self._write(_INSERT_MENU)
        option = self._read_option()
        self._write(list_info(len(self.roster), self.roster.is_empty()))

        if option == 1:
            self.roster.insert_front(student)
        elif option == 2:
            self.roster.insert_back(student)
        elif option == 3:
            self.roster.insert_sorted(student)
        elif option == 0:
            self._going_back()
        else:
            self._error(_INVALID_OPTION)

        self._clear()
        self._show_roster()

    def remove_student(self) -> None:
        """Remove a student from the front, the back or by registration."""
        self._clear()
        self._show_roster()
        self._write(_REMOVE_MENU)
        option = self._read_option()

        try:
            if option == 1:
                self.roster.remove_front()
            elif option == 2:
                self.roster.remove_back()
            elif option == 3:
                registration = self._prompt_int("Digite a matrícula do aluno: ")
                if registration is not None:
                    if registration >= 0:
                        self.roster.remove_by_registration(registration)
                    else:
                        self._error(_INVALID_REGISTRATION)
            elif option == 0:
                self._going_back()
            else:
                self._error(_INVALID_OPTION)
        except RosterError:
            pass

        self._clear()
        self._show_roster()

    def query_student(self) -> None:
        """Look up a student by registration or by position and show it."""
        self._clear()
        self._show_roster()
        self._write(_QUERY_MENU)
        option = self._read_option()

        if option == 1:
            registration = self._prompt_int("Digite a matrícula do aluno: ")
            if registration is None:
                return
            if registration < 0:
                self._error(_INVALID_REGISTRATION)
                return
            try:
                student = self.roster.find_by_registration(registration)
            except StudentNotFound:
                self._error("Matrícula não encontrada. \n")
                return
            self._clear()
            self._write(format_student(student))
        elif option == 2:
            position = self._prompt_int("Digite a posicao do aluno: ")
            if position is None:
                return
            if position < 0:
                self._error("Posição inválida. Deve ser maior que 0. \n")
                return
            try:
                student = self.roster.find_at(position)
            except StudentNotFound:
                self._error("Posição não encontrada. \n")
                return
            self._clear()
            self._write(format_student(student))
        elif option == 0:
            self._going_back()
        else:
            self._error(_INVALID_OPTION)

    def swap_students(self) -> None:
        """Exchange the positions of two students chosen by registration."""
        self._clear()
        self._show_roster()
        first = self._prompt_int("Digite a matrícula do primeiro aluno: ")
        second = self._prompt_int("Digite a matrícula do segundo aluno: ")

        if first is None or second is None:
            self._error(_NOT_NUMBERS)
        elif first < 0 or second < 0:
            self._error(_INVALID_REGISTRATION)
        else:
            try:
                self.roster.swap(first, second)
            except RosterError:
                pass

        self._clear()
        self._show_roster()

    def print_students(self) -> None:
        """Show the whole roster."""
        self._clear()
        self._show_roster()

    def load_data(self) -> None:
        """Append the sample students, with their averages, to the roster."""
        for student in sample_students():
            self.roster.insert_back(compute_average(student))

        self._clear()
        if self.roster.is_empty():
            self._write("Dados não carregados.\n")
        else:
            self._write("Dados carregados e inseridos na lista com sucesso.\n")
        self._show_roster()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive roster menu."""
    Menu(Roster()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())