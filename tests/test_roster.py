import pytest

from gradebook.roster import (
    RED_TEXT,
    RESET_TEXT,
    Roster,
    RosterError,
    Student,
    StudentNotFound,
    compute_average,
    format_student,
    format_table,
)


def registrations(roster):
    return [student.registration for student in roster]


@pytest.fixture
def roster():
    return Roster([Student(11), Student(22), Student(33), Student(44)])


def test_compute_average_clamps_negative_grades():
    result = compute_average(Student(1, -3.0, 6.0, 6.0))
    assert result.n1 == 0
    assert result.n2 == 6.0
    assert result.average == pytest.approx((0 + 6.0 + 6.0) / 3.0)


def test_compute_average_does_not_change_original():
    original = Student(1, -1.0, 2.0, 3.0)
    compute_average(original)
    assert original.n1 == -1.0
    assert original.average == 0.0


def test_approved_threshold():
    assert compute_average(Student(1, 6.0, 6.0, 6.0)).approved is True
    assert compute_average(Student(1, 5.0, 6.0, 6.0)).approved is False


def test_default_student_not_approved():
    assert Student(5).approved is False


def test_insert_front_and_back():
    r = Roster()
    r.insert_back(Student(2))
    r.insert_front(Student(1))
    r.insert_back(Student(3))
    assert registrations(r) == [1, 2, 3]
    assert len(r) == 3


def test_insert_sorted_orders_and_computes_average():
    r = Roster()
    for reg in (30, 10, 20, 40, 5):
        r.insert_sorted(Student(reg, 9.0, 9.0, 9.0))
    assert registrations(r) == [5, 10, 20, 30, 40]
    assert all(s.average == pytest.approx(9.0) for s in r)


def test_insert_sorted_duplicate_goes_before_existing():
    r = Roster([Student(10, name="old")])
    r.insert_sorted(Student(10, name="new"))
    assert [s.name for s in r] == ["new", "old"]


def test_remove_front_and_back(roster):
    assert roster.remove_front().registration == 11
    assert roster.remove_back().registration == 44
    assert registrations(roster) == [22, 33]


def test_remove_single_element_leaves_empty():
    r = Roster([Student(1)])
    r.remove_back()
    assert r.is_empty()


def test_remove_from_empty_raises():
    r = Roster()
    with pytest.raises(RosterError):
        r.remove_front()
    with pytest.raises(RosterError):
        r.remove_back()


def test_remove_by_registration(roster):
    removed = roster.remove_by_registration(33)
    assert removed.registration == 33
    assert registrations(roster) == [11, 22, 44]


def test_remove_missing_registration_raises(roster):
    with pytest.raises(StudentNotFound):
        roster.remove_by_registration(99)
    with pytest.raises(StudentNotFound):
        Roster().remove_by_registration(1)


def test_find_at(roster):
    assert roster.find_at(1).registration == 11
    assert roster.find_at(4).registration == 44


@pytest.mark.parametrize("position", [0, -1, 5])
def test_find_at_invalid_position(roster, position):
    with pytest.raises(StudentNotFound):
        roster.find_at(position)


def test_find_by_registration_returns_stored_student(roster):
    found = roster.find_by_registration(22)
    found.name = "changed"
    assert roster.find_at(2).name == "changed"


def test_find_by_registration_missing(roster):
    with pytest.raises(StudentNotFound):
        roster.find_by_registration(7)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (11, 44, [44, 22, 33, 11]),
        (11, 22, [22, 11, 33, 44]),
        (33, 22, [11, 33, 22, 44]),
    ],
)
def test_swap(roster, a, b, expected):
    roster.swap(a, b)
    assert registrations(roster) == expected


def test_swap_errors(roster):
    with pytest.raises(RosterError):
        roster.swap(11, 11)
    with pytest.raises(StudentNotFound):
        roster.swap(11, 99)
    with pytest.raises(RosterError):
        Roster().swap(1, 2)


def test_clear_and_is_empty(roster):
    assert not roster.is_empty()
    roster.clear()
    assert roster.is_empty()
    assert len(roster) == 0


def test_format_table_header_and_status():
    text = format_table([compute_average(Student(11, 9.5, 7.8, 5.6))])
    lines = text.split("\n")
    assert lines[0] == ""
    assert lines[1].startswith(" Matrícula | N1       | N2")
    assert "Aprovado" in text
    assert RED_TEXT not in text
    assert text.endswith("\n\n")


def test_format_failed_student_highlighted():
    text = format_student(compute_average(Student(22, 1.0, 1.0, 1.0)))
    assert RED_TEXT in text
    assert RESET_TEXT in text
    assert "Reprovado" in text
    assert text.endswith("\n")


def test_format_student_row_layout():
    text = format_student(compute_average(Student(11, 9.5, 7.8, 5.6)))
    assert "11         | 9.50     | 7.80     | 5.60     |" in text


def test_roster_format_matches_format_table(roster):
    assert roster.format() == format_table(list(roster))