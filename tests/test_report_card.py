import io

import pytest

from algokit.report_card import (
    Grade,
    Student,
    builtin_students,
    format_report,
    grade_for,
    main,
)


@pytest.mark.parametrize(
    "cgpa,grade",
    [
        (9.5, Grade.A_PLUS),
        (9.0, Grade.A),
        (8.5, Grade.A),
        (7.5, Grade.B_PLUS),
        (6.5, Grade.B),
        (5.5, Grade.C),
        (4.5, Grade.D),
        (4.0, Grade.E),
        (0.0, Grade.E),
    ],
)
def test_grade_for(cgpa, grade):
    assert grade_for(cgpa) is grade


def test_builtin_students():
    students = builtin_students()
    assert [s.roll_number for s in students] == [1, 2, 3, 4]
    assert [s.name for s in students] == [
        "Alisha", "Rocky Malvia", "Twinkle Khajuria", "Ayushi Sharma",
    ]
    assert students[0].grade() is Grade.A_PLUS
    assert students[3].grade() is Grade.A


def test_cgpa_of_uniform_marks():
    assert Student(7, "Dana", (80, 80, 80, 80, 80)).cgpa() == pytest.approx(8.0)


def test_cgpa_orders_like_marks():
    low = Student(5, "Low", (50, 60, 70, 40, 55))
    high = Student(6, "High", (51, 60, 70, 40, 55))
    assert high.cgpa() > low.cgpa()


def test_student_needs_five_marks():
    with pytest.raises(ValueError):
        Student(5, "Short", (90, 90))


def test_format_report_contents():
    student = Student(5, "Robin", (30, 20, 10, 40, 35))
    report = format_report(student)
    assert report.startswith("Name: Robin\n")
    assert Grade.E.label in report
    assert "Failed, have to apply for re-test" in report


def test_main_prints_builtin_student(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Rocky Malvia" in out
    assert "Alisha" not in out


def test_main_reads_new_students(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("6\n5\nBob 90 90 90 90 90\nEve 30 30 30 30 30\n")
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Name: Bob" in out
    assert "Name: Eve" in out
    assert out.index("Name: Bob") < out.index("Name: Eve")
    assert "Failed, have to apply for re-test" in out


def test_main_fails_on_bad_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("many\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err