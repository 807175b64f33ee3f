from .utils.constants import EMAIL_STRUCTURE, FINAL_INSTRUCTION, PROMPT_PREAMBLE


def build_prompt(content: str, tone: str | None = None) -> str:
    lines = [PROMPT_PREAMBLE, "", f"Email Requirements: {content}"]
    if tone:
        lines.append(f"Tone: {tone}")

    lines.append("")
    lines.append("Write a complete professional email including:")
    lines.extend(f"- {item}" for item in EMAIL_STRUCTURE)
    lines.append("")
    lines.append(FINAL_INSTRUCTION)
    return "\n".join(lines)
