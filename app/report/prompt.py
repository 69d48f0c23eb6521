from app.extraction.models import ExtractedText

PROMPT_HEADER = (
    "Analyze the following documents for contradictions and conflicts. "
    "Provide the output as a JSON object with a 'conflicts' array. "
    "Each conflict object should have 'document1', 'document2', 'description', "
    "and 'suggestion' fields. If no conflicts are found, return an empty "
    "'conflicts' array.\n\nDocuments:\n\n"
)


def build_prompt(documents: list[ExtractedText]) -> str:
    """Concatenate the instruction header and every document in input order."""
    sections = [
        f"--- Document {index}: {doc.name} ---\n{doc.content}\n\n"
        for index, doc in enumerate(documents, start=1)
    ]
    return PROMPT_HEADER + "".join(sections)
