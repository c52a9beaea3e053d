"""Interactive menu shell for managing student records."""

import re
from typing import Callable, Dict, TextIO
from loguru import logger

from student_records.core.exceptions import StorageError
from student_records.models.student import Student
from student_records.repositories.base import StudentRepository

ADD, VIEW, UPDATE, DELETE, EXIT = 1, 2, 3, 4, 5

MENU_TEXT = (
    "\n===== Student Management System =====\n"
    "1. Add Student\n"
    "2. View All Students\n"
    "3. Update Student\n"
    "4. Delete Student\n"
    "5. Exit\n"
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class StudentShell:
    """
    Text menu over a StudentRepository.
    
    Input and output streams are passed in, so the shell can be driven by a
    terminal or by scripted input in tests. End of input behaves like Exit.
    """
    
    def __init__(self, repository: StudentRepository, stdin: TextIO, stdout: TextIO):
        self.repository = repository
        self.stdin = stdin
        self.stdout = stdout
        self._actions: Dict[int, Callable[[], None]] = {
            ADD: self.handle_add_student,
            VIEW: self.handle_view_students,
            UPDATE: self.handle_update_student,
            DELETE: self.handle_delete_student,
        }
    
    def run(self) -> int:
        """Run the menu loop until Exit. Returns the process exit code."""
        while True:
            self._write(MENU_TEXT)
            self._write("Enter your choice: ")
            
            try:
                choice = self._read_int()
                
                if choice == EXIT:
                    break
                
                action = self._actions.get(choice)
                if action is None:
                    self._println("Invalid choice, please try again.")
                    continue
                
                action()
                
            except EOFError:
                self._println()
                break
        
        self._println("Exiting... Goodbye!")
        return 0
    
    def handle_add_student(self) -> None:
        self._write("Enter Roll Number: ")
        roll = self._read_line()
        
        self._write("Enter Name: ")
        name = self._read_line()
        
        self._write("Enter Age: ")
        age = self._read_age()
        
        self._write("Enter Course: ")
        course = self._read_line()
        
        try:
            self.repository.add(Student(roll, name, age, course))
            self._println("Student added successfully!")
        except StorageError as e:
            logger.error(f"Error adding student {roll}: {e}")
            self._println(f"Error adding student: {e}")
    
    def handle_view_students(self) -> None:
        try:
            students = self.repository.list_all()
        except StorageError as e:
            logger.error(f"Error reading students: {e}")
            self._println(f"Error reading students: {e}")
            return
        
        if not students:
            self._println("No students found.")
            return
        
        self._println("\n--- Student List ---")
        for student in students:
            self._println(format_student(student))
    
    def handle_update_student(self) -> None:
        self._write("Enter Roll Number of student to update: ")
        roll = self._read_line()
        
        self._println("Enter new details:")
        
        self._write("New Name: ")
        name = self._read_line()
        
        self._write("New Age: ")
        age = self._read_age()
        
        self._write("New Course: ")
        course = self._read_line()
        
        try:
            if self.repository.update(roll, Student(roll, name, age, course)):
                self._println("Student updated successfully!")
            else:
                self._println(f"Student with roll number {roll} not found.")
        except StorageError as e:
            logger.error(f"Error updating student {roll}: {e}")
            self._println(f"Error updating student: {e}")
    
    def handle_delete_student(self) -> None:
        self._write("Enter Roll Number of student to delete: ")
        roll = self._read_line()
        
        try:
            if self.repository.delete(roll):
                self._println("Student deleted successfully!")
            else:
                self._println(f"Student with roll number {roll} not found.")
        except StorageError as e:
            logger.error(f"Error deleting student {roll}: {e}")
            self._println(f"Error deleting student: {e}")
    
    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")
    
    def _read_int(self) -> int:
        """Read a whole number, re-prompting until one is entered."""
        while True:
            text = self._read_line().strip()
            if _INT_PATTERN.fullmatch(text):
                return int(text)
            self._write("Please enter a valid number: ")
    
    def _read_age(self) -> int:
        while True:
            age = self._read_int()
            if age >= 0:
                return age
            self._write("Please enter a valid number: ")
    
    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()
    
    def _println(self, text: str = "") -> None:
        self._write(text + "\n")


def format_student(student: Student) -> str:
    """Render one record as the multi-line block shown by View."""
    return (
        f"Roll No  : {student.roll_number}\n"
        f"Name     : {student.name}\n"
        f"Age      : {student.age}\n"
        f"Course   : {student.course}\n"
        "---------------------------"
    )
