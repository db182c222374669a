from lms.core.enums import Role
from lms.services import ActionStatus, AdminService


def test_list_courses(admin_service):
    result = admin_service.list_courses()

    assert result.success
    assert result.message.splitlines() == [
        "1: Mathematics (Teacher: teacher1@example.com)",
        "2: Physics (Teacher: teacher2@example.com)",
    ]


def test_list_courses_empty(empty_context):
    result = AdminService(empty_context).list_courses()

    assert result.status is ActionStatus.EMPTY
    assert result.message == "There are no courses available."


def test_add_course_for_unregistered_teacher_requires_registration(admin_service, context):
    result = admin_service.add_course("Biology", "newteacher@example.com")

    assert result.status is ActionStatus.TEACHER_NOT_REGISTERED
    assert len(context.courses) == 2
    assert not context.users.exists("newteacher@example.com")


def test_add_course_registers_teacher_inline(admin_service, context):
    result = admin_service.add_course("Biology", "newteacher@example.com",
                                      register_teacher=("Dr Green", "leaf"))

    assert result.success
    teacher = context.users.find_by_email("newteacher@example.com")
    assert teacher.role is Role.TEACHER
    assert teacher.username == "Dr Green"
    assert result.data["registered_teacher"] is teacher
    assert context.courses.get_course(2).name == "Biology"


def test_add_course_refuses_teacher_already_assigned(admin_service, context):
    result = admin_service.add_course("Algebra II", "teacher1@example.com")

    assert result.status is ActionStatus.TEACHER_ALREADY_ASSIGNED
    assert result.data["assigned_course"] == "Mathematics"
    assert len(context.courses) == 2


def test_add_course_for_registered_teacher_without_course(admin_service, context):
    context.courses.remove_course(1)

    result = admin_service.add_course("Astronomy", "teacher2@example.com")

    assert result.success
    assert result.data["registered_teacher"] is None
    assert [c.name for c in context.courses] == ["Mathematics", "Astronomy"]


def test_add_course_rejects_invalid_input(admin_service, context):
    assert admin_service.add_course("", "teacher1@example.com").message == "Invalid course name"
    assert admin_service.add_course("Biology", "bad-email").message == "Invalid teacher email"
    assert len(context.courses) == 2


def test_delete_course_uses_one_based_position(admin_service, context):
    result = admin_service.delete_course(1)

    assert result.success
    assert result.message == "Successfully deleted course: Mathematics"
    assert [c.name for c in context.courses] == ["Physics"]


def test_delete_course_invalid_position(admin_service, context):
    assert admin_service.delete_course(0).status is ActionStatus.INVALID_INDEX
    assert admin_service.delete_course(3).status is ActionStatus.INVALID_INDEX
    assert len(context.courses) == 2


def test_delete_course_when_empty(empty_context):
    result = AdminService(empty_context).delete_course(1)
    assert result.status is ActionStatus.EMPTY


def test_edit_course_add_and_remove_content(admin_service, context):
    added = admin_service.edit_course_add_content(2, "Optics")
    removed = admin_service.edit_course_remove_content(2, 1)

    assert added.success and removed.success
    assert removed.data["removed"] == "Newton's Laws"
    assert context.courses.get_course(1).contents == ("Thermodynamics", "Optics")


def test_edit_course_remove_content_errors(admin_service, context):
    course = context.courses.get_course(0)
    bad_index = admin_service.edit_course_remove_content(1, 3)
    bad_course = admin_service.edit_course_remove_content(5, 1)
    course.remove_content(0)
    course.remove_content(0)
    empty = admin_service.edit_course_remove_content(1, 1)

    assert bad_index.status is ActionStatus.INVALID_INDEX
    assert bad_index.message == "Invalid content index. Please enter a number between 1 and 2."
    assert bad_course.status is ActionStatus.INVALID_INDEX
    assert empty.status is ActionStatus.EMPTY


def test_edit_course_add_content_rejects_empty_text(admin_service):
    result = admin_service.edit_course_add_content(1, "")
    assert result.status is ActionStatus.INVALID_INPUT


def test_enroll_student_creates_account(admin_service, context):
    result = admin_service.enroll_student(1, "s1@example.com", "pw")

    assert result.success
    student = context.users.find_by_email("s1@example.com")
    assert student.role is Role.STUDENT
    assert student.username == "s1"
    assert context.courses.get_course(0).enrolled_students == ("s1@example.com",)


def test_enroll_student_refuses_existing_account(admin_service, context):
    admin_service.enroll_student(1, "s1@example.com", "pw")

    again = admin_service.enroll_student(2, "s1@example.com", "pw")
    teacher = admin_service.enroll_student(2, "teacher1@example.com", "pw")

    assert again.status is ActionStatus.DUPLICATE
    assert teacher.status is ActionStatus.DUPLICATE
    assert context.courses.get_course(1).enrolled_students == ()


def test_enroll_student_rejects_bad_input(admin_service, context):
    assert admin_service.enroll_student(3, "s1@example.com", "pw").status is ActionStatus.INVALID_INDEX
    assert admin_service.enroll_student(1, "not-an-email", "pw").status is ActionStatus.INVALID_INPUT
    assert admin_service.enroll_student(1, "s1@example.com", "").status is ActionStatus.INVALID_INPUT
    assert not context.users.exists("s1@example.com")


def test_remove_student_outcomes(admin_service, context):
    empty = admin_service.remove_student(1, "s1@example.com")
    admin_service.enroll_student(1, "s1@example.com", "pw")
    missing = admin_service.remove_student(1, "s2@example.com")
    bad_index = admin_service.remove_student(9, "s1@example.com")
    removed = admin_service.remove_student(1, "s1@example.com")

    assert empty.status is ActionStatus.EMPTY
    assert missing.status is ActionStatus.NOT_FOUND
    assert missing.message == "Student not found in the course."
    assert bad_index.status is ActionStatus.INVALID_INDEX
    assert bad_index.message == "Invalid course index. Please enter a number between 1 and 2."
    assert removed.success
    assert context.courses.get_course(0).enrolled_students == ()
    # the account itself is kept
    assert context.users.exists("s1@example.com")


def test_view_reports(admin_service, context):
    admin_service.enroll_student(1, "s1@example.com", "pw")
    context.courses.get_course(0).add_grade("s1@example.com", 77)

    report = admin_service.view_reports().message

    assert report.startswith("Courses Report:\nCourse: Mathematics (Teacher: teacher1@example.com)")
    assert "s1@example.com: 77%" in report
    assert "Course: Physics (Teacher: teacher2@example.com)" in report


def test_view_reports_empty(empty_context):
    result = AdminService(empty_context).view_reports()
    assert result.message == "No courses available to generate reports."
