import io

import docx

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import TextExtracted, UploadedDocument


class DocxExtractor(BaseTextExtractor):
    """Extracts raw text from Word documents using python-docx.

    Body paragraphs come first, one per line, followed by table cell text
    in row order.
    """

    def extract(self, document: UploadedDocument) -> TextExtracted:
        try:
            parsed = docx.Document(io.BytesIO(document.raw_bytes))
        except Exception as exc:
            raise ExtractionError(f"python-docx could not open document: {exc}") from exc

        lines = [paragraph.text for paragraph in parsed.paragraphs]
        for table in parsed.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    lines.append("\t".join(cells))
        return TextExtracted(text="\n".join(lines).strip())
