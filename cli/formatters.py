# cli/formatters.py

from textwrap import dedent

from logic.commands.command import Command
from models.person import Person


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"
    return f"{line}\n{centered_title}\n{line}"


# === Person formatters ===


def format_person_oneline(person: Person) -> str:
    tags = " ".join(f"[{tag}]" for tag in sorted(person.tags, key=str))
    return (
        f"{str(person.name):<20} | {str(person.student_class):<6} | "
        f"{person.attendance.ratio:>5} | {person.total_score:6.2f}% {tags}".rstrip()
    )


def format_person_multiline(person: Person) -> str:
    remarks = "; ".join(sorted(str(r) for r in person.remarks)) or "None"
    tags = ", ".join(sorted(str(t) for t in person.tags)) or "None"
    return dedent(
        f"""\
        Person: {person.name}
        ... Phone: {person.phone}
        ... Email: {person.email}
        ... Address: {person.address}
        ... Class: {person.student_class}
        ... {person.attendance}
        ... Remarks: {remarks}
        ... Subjects: {person.subject_handler}
        ... Tags: {tags}
        """
    )


# === Command formatters ===


def format_help_text(command_types: tuple[type[Command], ...]) -> str:
    banner = format_banner_text("WATSON COMMANDS")
    usages = "\n\n".join(command_type.MESSAGE_USAGE for command_type in command_types)
    return f"{banner}\n{usages}"
