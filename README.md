# gradebook

A small interactive roster of students. Each student has a registration
number and three grades. The program works out the average of the three
grades and marks the student as approved (average of 6.0 or more) or
failed.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
gradebook
```

The menu and its messages are in Portuguese. The main menu offers:

- **1 - Inserir Aluno**: asks for a registration number and three grades.
  The registration must not be negative and each grade must be between
  0 and 10. The student is then added to the front, to the back, or in
  registration order.
- **2 - Remover Aluno**: removes the student at the front, at the back,
  or with a given registration number.
- **3 - Consultar Aluno**: finds a student by registration number or by
  position, where position 1 is the first student.
- **4 - Trocar Alunos**: swaps the places of two students, given their
  registration numbers.
- **5 - Imprimir Alunos**: shows the roster as a table. Failed students
  are shown in red.
- **6 - Carregar dados**: adds ten sample students to the end of the
  roster.
- **0 - Sair**: exits. The program also exits when input ends.

The screen is cleared between steps with `clear` (or `cls` on Windows).

## Using the library

```python
from gradebook.roster import Roster, Student, compute_average, format_student

roster = Roster()
roster.insert_sorted(Student(22, n1=8.0, n2=7.5, n3=4.5))
roster.insert_sorted(Student(11, n1=9.5, n2=7.8, n3=5.6))

print(len(roster))                       # 2
print([s.registration for s in roster])  # [11, 22]

student = roster.find_by_registration(22)
print(student.average, student.approved)

roster.insert_back(compute_average(Student(33, n1=6.5, n2=8.2, n3=6.0)))
print(roster.find_at(3).registration)    # 33

roster.swap(11, 22)
print(roster.format())
print(format_student(student))
```

- `insert_sorted` works out the student's average as it inserts them.
  `insert_front` and `insert_back` store the student as given, so pass
  them the result of `compute_average`, which returns a copy with
  negative grades raised to zero and the average set.
- `approved` is a property: true when the stored average is 6.0 or more.
- `remove_front`, `remove_back` and `remove_by_registration` return the
  student they removed.
- A lookup or removal that finds nothing raises `StudentNotFound`, which
  is a kind of `RosterError` (and of `LookupError`). Removing from an
  empty roster, or swapping a student with itself, raises `RosterError`.
- `format_table` and `format_student` render students as text tables.

`gradebook.cli` holds the `Menu` class behind the command, along with
`sample_students()` and `list_info()`. `Menu` takes an optional roster,
an input function, an output stream and a screen-clearing function, so
it can be driven without a terminal.

## What it does not do

The roster lives only in memory. Nothing is saved to a file, so the
students are lost when the program exits. Student names are kept on
`Student` but are not asked for or shown by the menu.