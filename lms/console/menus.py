"""
Role menus for the console. Each menu loops until its last option is chosen.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..core.entities import User
from ..core.enums import Role
from ..core.validator import is_valid_email
from ..services import AdminService, LMSContext, StudentService, TeacherService
from ..services.admin_service import DUPLICATE_ACCOUNT
from ..services.student_service import NOT_ENROLLED_ANYWHERE, NOTHING_TO_ENROLL
from ..services.teacher_service import NO_ASSIGNED_COURSES
from .io import Console

MenuOption = Tuple[str, Optional[Callable[[], None]]]


def run_menu(console: Console, title: str, options: Sequence[MenuOption]) -> None:
    """Show ``options`` until one without a handler (log out / back) is picked."""
    labels = [label for label, _ in options]
    while True:
        choice = console.choose(title, labels)
        handler = options[choice - 1][1]
        if handler is None:
            return
        handler()


# Admin

def run_admin_menu(console: Console, context: LMSContext, user: User) -> None:
    admin = AdminService(context)
    options: List[MenuOption] = [
        ("Manage Courses", lambda: _admin_manage_courses(console, admin)),
        ("View Reports", lambda: console.show(admin.view_reports())),
        ("Enroll Student", lambda: _admin_enroll_student(console, admin)),
        ("Remove Student", lambda: _admin_remove_student(console, admin)),
        ("Log Out", None),
    ]
    run_menu(console, "Admin Menu:", options)
    console.write("Logging out...")


def _admin_manage_courses(console: Console, admin: AdminService) -> None:
    options: List[MenuOption] = [
        ("Add Course", lambda: _admin_add_course(console, admin)),
        ("Delete Course", lambda: _admin_delete_course(console, admin)),
        ("Edit Course", lambda: _admin_edit_course(console, admin)),
        ("Display Courses", lambda: console.show(admin.list_courses())),
        ("Back", None),
    ]
    run_menu(console, "Manage Courses:", options)
    console.write("Returning...")


def _admin_add_course(console: Console, admin: AdminService) -> None:
    name = console.prompt("Enter course name: ")
    teacher_email = console.prompt("Enter teacher's email: ")

    register_teacher = None
    if is_valid_email(teacher_email) and not admin.is_registered(teacher_email):
        console.write("Error: The email does not belong to a registered teacher.")
        if not console.confirm("Would you like to register this teacher? (y/n): "):
            console.write("Course addition canceled.")
            return
        teacher_name = console.prompt("Enter teacher's name: ")
        teacher_password = console.prompt("Enter teacher's password: ")
        register_teacher = (teacher_name, teacher_password)

    result = admin.add_course(name, teacher_email, register_teacher)
    teacher = result.data.get('registered_teacher')
    if teacher is not None:
        console.write(f"Teacher registered successfully: {teacher.username} ({teacher.email})")
    console.show(result)


def _admin_pick_course(console: Console, admin: AdminService, prompt: str,
                       empty_message: str) -> Optional[int]:
    listing = admin.list_courses()
    if not listing.success:
        console.write(empty_message)
        return None
    count = listing.data['count']
    console.write(listing.message)
    return console.prompt_int(prompt.format(count=count), 1, count)


def _admin_delete_course(console: Console, admin: AdminService) -> None:
    position = _admin_pick_course(console, admin, "Enter course index to delete (1-{count}): ",
                                  "There are no courses to delete.")
    if position is not None:
        console.show(admin.delete_course(position))


def _admin_edit_course(console: Console, admin: AdminService) -> None:
    position = _admin_pick_course(console, admin, "Enter course index to edit (1-{count}): ",
                                  "There are no courses available.")
    if position is None:
        return
    course = admin.course_at(position)
    console.write(f"Editing course: {course.name}")
    if not console.confirm("Would you like to edit the course content? (y/n): "):
        return

    choice = console.prompt_int("1. Add content\n2. Remove content\nEnter choice: ", 1, 2)
    if choice == 1:
        content = console.prompt("Enter content: ")
        console.show(admin.edit_course_add_content(position, content))
        return

    contents = course.contents
    if not contents:
        console.write("There is no content to remove.")
        return
    lines = ["", "Current content:"]
    lines.extend(f"{number}. {item}" for number, item in enumerate(contents, 1))
    console.write("\n".join(lines))
    content_position = console.prompt_int(
        f"Enter content index to remove (1-{len(contents)}): ", 1, len(contents))
    console.show(admin.edit_course_remove_content(position, content_position))


def _admin_enroll_student(console: Console, admin: AdminService) -> None:
    position = _admin_pick_course(console, admin, "Enter course index to enroll student (1-{count}): ",
                                  "There are no courses available for enrollment.")
    if position is None:
        return
    student_email = console.prompt_email("Enter student's email: ")
    if admin.is_registered(student_email):
        console.write(DUPLICATE_ACCOUNT)
        return
    password = console.prompt("Enter password for the student: ")
    result = admin.enroll_student(position, student_email, password)
    console.show(result)
    if result.success:
        console.write(f"Username: {result.data['student'].username}")


def _admin_remove_student(console: Console, admin: AdminService) -> None:
    position = _admin_pick_course(console, admin, "Enter course index to remove student (1-{count}): ",
                                  "There are no courses available.")
    if position is None:
        return
    if not admin.course_at(position).enrolled_students:
        console.write("There is no student here.")
        return
    student_email = console.prompt("Enter student's email to remove: ")
    console.show(admin.remove_student(position, student_email))


# Teacher

def run_teacher_menu(console: Console, context: LMSContext, user: User) -> None:
    teacher = TeacherService(context)
    options: List[MenuOption] = [
        ("Manage Courses", lambda: _teacher_manage_courses(console, teacher, user)),
        ("View Reports", lambda: console.show(teacher.view_reports(user))),
        ("Log Out", None),
    ]
    run_menu(console, "Teacher Menu:", options)
    console.write("Logging out...")


def _teacher_manage_courses(console: Console, teacher: TeacherService, user: User) -> None:
    options: List[MenuOption] = [
        ("View Course", lambda: _teacher_view_course(console, teacher, user)),
        ("Add Content", lambda: _teacher_add_content(console, teacher, user)),
        ("Add Grade", lambda: _teacher_add_grade(console, teacher, user)),
        ("View Assigned Students", lambda: _teacher_view_students(console, teacher, user)),
        ("Back", None),
    ]
    run_menu(console, "Manage Courses:", options)
    console.write("Returning...")


def _teacher_pick_course(console: Console, teacher: TeacherService, user: User) -> Optional[int]:
    courses = teacher.assigned_courses(user)
    if not courses:
        console.write(NO_ASSIGNED_COURSES)
        return None
    return console.choose_course("Your Assigned Courses:", courses,
                                 f"Enter course index (1-{len(courses)}): ")


def _teacher_view_course(console: Console, teacher: TeacherService, user: User) -> None:
    position = _teacher_pick_course(console, teacher, user)
    if position is not None:
        console.show(teacher.view_course(user, position))


def _teacher_add_content(console: Console, teacher: TeacherService, user: User) -> None:
    position = _teacher_pick_course(console, teacher, user)
    if position is None:
        return
    content = console.prompt("Enter the content to add: ")
    console.show(teacher.add_content(user, position, content))


def _teacher_add_grade(console: Console, teacher: TeacherService, user: User) -> None:
    position = _teacher_pick_course(console, teacher, user)
    if position is None:
        return
    student_email = console.prompt_email("Enter student's email: ")
    course = teacher.assigned_courses(user)[position - 1]
    if not course.is_enrolled(student_email):
        console.write("Student is not enrolled in this course.")
        return
    grade = console.prompt_int("Enter grade (0-100): ", 0, 100)
    console.show(teacher.add_grade(user, position, student_email, grade))


def _teacher_view_students(console: Console, teacher: TeacherService, user: User) -> None:
    position = _teacher_pick_course(console, teacher, user)
    if position is not None:
        console.show(teacher.view_assigned_students(user, position))


# Student

def run_student_menu(console: Console, context: LMSContext, user: User) -> None:
    student = StudentService(context)
    options: List[MenuOption] = [
        ("View Enrolled Courses", lambda: _student_view_courses(console, student, user)),
        ("View Grades", lambda: _student_view_grades(console, student, user)),
        ("Enroll in Course", lambda: _student_enroll(console, student, user)),
        ("Log Out", None),
    ]
    run_menu(console, "Student Menu:", options)
    console.write("Logging out...")


def _student_pick_enrolled(console: Console, student: StudentService, user: User,
                           prompt: str) -> int:
    courses = student.enrolled_courses(user)
    if not courses:
        console.write(NOT_ENROLLED_ANYWHERE)
        return 0
    return console.choose_course("Your Enrolled Courses:", courses, prompt, allow_back=True)


def _student_view_courses(console: Console, student: StudentService, user: User) -> None:
    position = _student_pick_enrolled(console, student, user,
                                      "Enter course index to view content (or 0 to go back): ")
    if position:
        console.show(student.view_course_contents(user, position))


def _student_view_grades(console: Console, student: StudentService, user: User) -> None:
    position = _student_pick_enrolled(console, student, user,
                                      "Enter course index to view grades (or 0 to go back): ")
    if position:
        console.show(student.view_grade(user, position))


def _student_enroll(console: Console, student: StudentService, user: User) -> None:
    courses = student.available_courses(user)
    if not courses:
        console.write(NOTHING_TO_ENROLL)
        return
    position = console.choose_course("Available Courses:", courses,
                                     "Enter course index to enroll (or 0 to go back): ",
                                     allow_back=True)
    if position:
        console.show(student.enroll(user, position))


ROLE_MENUS: Dict[Role, Callable[[Console, LMSContext, User], None]] = {
    Role.ADMIN: run_admin_menu,
    Role.TEACHER: run_teacher_menu,
    Role.STUDENT: run_student_menu,
}
