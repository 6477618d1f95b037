"""Parsing for the bulk "paste a guest list" form"""
from typing import Dict, List, Optional


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def parse_guest_line(line: str) -> Dict[str, Optional[str]]:
    """`name,email,phone` with email and phone optional"""
    parts = [part.strip() for part in line.split(",")]
    name = parts[0] if parts else ""
    email = parts[1] if len(parts) > 1 and parts[1] else None
    phone = parts[2] if len(parts) > 2 and parts[2] else None
    return {
        "name": capitalize_words(name) if name else "",
        "email": email,
        "phone": phone,
    }


def parse_guest_list(text: str) -> List[Dict[str, Optional[str]]]:
    """One entry per non-blank line, in paste order"""
    return [parse_guest_line(line) for line in text.splitlines() if line.strip()]


def last_name(full_name: str) -> str:
    """Family name used as the default guest side; single names are kept whole"""
    parts = full_name.strip().split(" ")
    return parts[-1] if len(parts) > 1 else full_name.strip()
