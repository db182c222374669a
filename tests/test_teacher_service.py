from lms.core.entities import User
from lms.core.enums import Role
from lms.services import ActionStatus


def enroll(context, course_index, email):
    context.courses.get_course(course_index).enroll_student(email)


def test_assigned_courses_only_include_own_courses(teacher_service, teacher1):
    assert [c.name for c in teacher_service.assigned_courses(teacher1)] == ["Mathematics"]


def test_view_course_lists_contents(teacher_service, teacher1):
    result = teacher_service.view_course(teacher1, 1)

    assert result.message.splitlines() == [
        "Viewing course: Mathematics",
        "Course Contents:",
        "- Introduction to Algebra",
        "- Advanced Calculus",
    ]


def test_view_course_rejects_position_outside_own_list(teacher_service, teacher1):
    # position 2 exists in the registry but not among teacher1's courses
    assert teacher_service.view_course(teacher1, 2).status is ActionStatus.INVALID_INDEX


def test_teacher_without_courses(teacher_service):
    idle = User("idle", "idle@example.com", "pw", Role.TEACHER)

    for result in (
        teacher_service.view_course(idle, 1),
        teacher_service.add_content(idle, 1, "x"),
        teacher_service.add_grade(idle, 1, "s@example.com", 50),
        teacher_service.view_assigned_students(idle, 1),
        teacher_service.view_reports(idle),
    ):
        assert result.status is ActionStatus.EMPTY
        assert result.message == "You are not assigned to any courses."


def test_add_content_mutates_registry_course(teacher_service, teacher1, context):
    result = teacher_service.add_content(teacher1, 1, "Linear Algebra")

    assert result.success
    assert context.courses.get_course(0).contents[-1] == "Linear Algebra"


def test_add_content_rejects_too_long_text(teacher_service, teacher1):
    result = teacher_service.add_content(teacher1, 1, "x" * 101)
    assert result.status is ActionStatus.INVALID_INPUT
    assert result.message == "Invalid content"


def test_add_grade_requires_enrollment(teacher_service, teacher1, context):
    result = teacher_service.add_grade(teacher1, 1, "s1@example.com", 85)

    assert result.status is ActionStatus.NOT_ENROLLED
    assert context.courses.get_course(0).grades == ()


def test_add_grade_for_enrolled_student(teacher_service, teacher1, context):
    enroll(context, 0, "s1@example.com")

    result = teacher_service.add_grade(teacher1, 1, "s1@example.com", 85)

    assert result.success
    assert result.message == "Grade added successfully for student: s1@example.com"
    assert context.courses.get_course(0).grade_for("s1@example.com").score == 85


def test_add_grade_rejects_bad_values(teacher_service, teacher1, context):
    enroll(context, 0, "s1@example.com")

    assert teacher_service.add_grade(teacher1, 1, "s1@example.com", 101).status is ActionStatus.INVALID_INPUT
    assert teacher_service.add_grade(teacher1, 1, "broken", 50).status is ActionStatus.INVALID_INPUT
    assert teacher_service.add_grade(teacher1, 5, "s1@example.com", 50).status is ActionStatus.INVALID_INDEX


def test_view_assigned_students(teacher_service, teacher1, context):
    empty = teacher_service.view_assigned_students(teacher1, 1)
    enroll(context, 0, "s1@example.com")
    enroll(context, 0, "s2@example.com")
    listed = teacher_service.view_assigned_students(teacher1, 1)

    assert empty.message == "Course: Mathematics has 0 students.\nThere are no students enrolled in this course."
    assert listed.message.splitlines() == [
        "Course: Mathematics has 2 students.",
        "s1@example.com",
        "s2@example.com",
    ]


def test_view_reports_only_covers_own_courses(teacher_service, teacher1):
    report = teacher_service.view_reports(teacher1).message

    assert report.startswith("Courses Report for teacher1@example.com:")
    assert "Mathematics" in report
    assert "Physics" not in report
