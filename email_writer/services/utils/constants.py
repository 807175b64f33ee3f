PROMPT_PREAMBLE = (
    "You are a professional email writer. Write a complete, well-structured email "
    "based on the following requirements. "
    "Do not ask any questions or request clarification. Write the email directly."
)

SUBJECT_PREFIX = "Subject: "
SIGNATURE_PLACEHOLDER = "[Your Name]"

EMAIL_STRUCTURE = [
    f"Subject line (start with '{SUBJECT_PREFIX}')",
    "Appropriate greeting",
    "Clear and concise main content",
    "Professional closing",
    f"Signature placeholder {SIGNATURE_PLACEHOLDER}",
]

FINAL_INSTRUCTION = "Write the email now:"

API_KEY_HEADER = "x-goog-api-key"
BODY_PREVIEW_CHARS = 2000
