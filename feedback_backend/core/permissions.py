"""
Instructor privileges.

Privileges are boolean flags granted per course, optionally overridden for
individual feedback sessions. Named roles expand to preset flags; the
``Custom`` role uses the flags stored with the instructor.

Dependencies: dataclasses (stdlib)
System role: Permission model consumed by the gatekeeper and privilege output
"""

from dataclasses import dataclass, field


CAN_MODIFY_COURSE = "canmodifycourse"
CAN_MODIFY_INSTRUCTOR = "canmodifyinstructor"
CAN_MODIFY_SESSION = "canmodifysession"
CAN_MODIFY_STUDENT = "canmodifystudent"
CAN_VIEW_STUDENT_IN_SECTIONS = "canviewstudentinsection"
CAN_VIEW_SESSION_IN_SECTIONS = "canviewsessioninsection"
CAN_SUBMIT_SESSION_IN_SECTIONS = "cansubmitsessioninsection"
CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS = "canmodifysessioncommentinsection"

COURSE_LEVEL_PRIVILEGES = (
    CAN_MODIFY_COURSE,
    CAN_MODIFY_INSTRUCTOR,
    CAN_MODIFY_SESSION,
    CAN_MODIFY_STUDENT,
    CAN_VIEW_STUDENT_IN_SECTIONS,
    CAN_VIEW_SESSION_IN_SECTIONS,
    CAN_SUBMIT_SESSION_IN_SECTIONS,
    CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS,
)

# Privileges that may be overridden for a single session
SESSION_LEVEL_PRIVILEGES = (
    CAN_VIEW_SESSION_IN_SECTIONS,
    CAN_SUBMIT_SESSION_IN_SECTIONS,
    CAN_MODIFY_SESSION_COMMENT_IN_SECTIONS,
)

ROLE_COOWNER = "Co-owner"
ROLE_MANAGER = "Manager"
ROLE_OBSERVER = "Observer"
ROLE_TUTOR = "Tutor"
ROLE_CUSTOM = "Custom"

ROLE_PRESETS: dict[str, frozenset[str]] = {
    ROLE_COOWNER: frozenset(COURSE_LEVEL_PRIVILEGES),
    ROLE_MANAGER: frozenset(COURSE_LEVEL_PRIVILEGES) - {CAN_MODIFY_COURSE},
    ROLE_OBSERVER: frozenset({CAN_VIEW_STUDENT_IN_SECTIONS, CAN_VIEW_SESSION_IN_SECTIONS}),
    ROLE_TUTOR: frozenset({
        CAN_VIEW_STUDENT_IN_SECTIONS,
        CAN_VIEW_SESSION_IN_SECTIONS,
        CAN_SUBMIT_SESSION_IN_SECTIONS,
    }),
    ROLE_CUSTOM: frozenset(),
}


@dataclass
class InstructorPrivileges:
    """Course-level flags with per-session overrides."""

    course_level: dict[str, bool] = field(default_factory=dict)
    session_level: dict[str, dict[str, bool]] = field(default_factory=dict)

    @classmethod
    def for_role(cls, role: str, stored: dict | None = None) -> "InstructorPrivileges":
        """
        Build privileges for an instructor role.

        Args:
            role: One of the ROLE_* names
            stored: Persisted privilege document ({"course_level": ..., "session_level": ...});
                course-level flags are only honoured for the Custom role

        Returns:
            InstructorPrivileges: Resolved privileges
        """
        stored = stored or {}
        if role in ROLE_PRESETS and role != ROLE_CUSTOM:
            granted = ROLE_PRESETS[role]
            course_level = {name: name in granted for name in COURSE_LEVEL_PRIVILEGES}
        else:
            stored_course = stored.get("course_level", {})
            course_level = {
                name: bool(stored_course.get(name, False)) for name in COURSE_LEVEL_PRIVILEGES
            }
        session_level = {
            session_name: {
                name: bool(flags[name]) for name in SESSION_LEVEL_PRIVILEGES if name in flags
            }
            for session_name, flags in stored.get("session_level", {}).items()
        }
        return cls(course_level=course_level, session_level=session_level)

    def is_allowed(self, privilege: str, session_name: str | None = None) -> bool:
        """
        Check a privilege, preferring a session override when one exists.

        Args:
            privilege: Privilege name
            session_name: Optional feedback session name

        Returns:
            bool: Whether the privilege is granted
        """
        if session_name is not None and privilege in SESSION_LEVEL_PRIVILEGES:
            overrides = self.session_level.get(session_name, {})
            if privilege in overrides:
                return overrides[privilege]
        return self.course_level.get(privilege, False)

    def for_session(self, session_name: str) -> dict[str, bool]:
        """Effective privilege flags for one session."""
        return {
            name: self.is_allowed(name, session_name) for name in COURSE_LEVEL_PRIVILEGES
        }
