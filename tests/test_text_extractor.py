"""Unit tests for document text extraction."""

import unittest

from resume_screener.cv_pipeline.text_extractor import extract_text
from resume_screener.errors import UnsupportedFormatError
from resume_screener.schemas.document import Document


class TestTextExtractor(unittest.TestCase):
    def test_txt_is_decoded_as_is(self):
        doc = Document.from_upload("resume.txt", "Jane Doe\nPython developer".encode("utf-8"))
        self.assertEqual(extract_text(doc), "Jane Doe\nPython developer")

    def test_doc_and_docx_decoded_like_text(self):
        for name in ("cv.doc", "cv.DOCX"):
            doc = Document.from_upload(name, b"plain words")
            self.assertEqual(extract_text(doc), "plain words")

    def test_invalid_bytes_do_not_fail(self):
        doc = Document.from_upload("resume.txt", b"abc \xff\xfe def")
        text = extract_text(doc)
        self.assertTrue(text.startswith("abc "))
        self.assertTrue(text.endswith(" def"))

    def test_utf8_bom_is_dropped(self):
        doc = Document.from_upload("resume.txt", b"\xef\xbb\xbfJohn Smith")
        self.assertEqual(extract_text(doc), "John Smith")

    def test_pdf_keeps_printable_ascii_and_collapses_whitespace(self):
        raw = b"%PDF-1.4\n\x00\x01 John   Smith\t\r\nPython \xe2\x9c\x93 dev  "
        doc = Document.from_upload("resume.pdf", raw)
        self.assertEqual(extract_text(doc), "%PDF-1.4 John Smith Python dev")

    def test_unsupported_extension_raises(self):
        doc = Document.from_upload("resume.xlsx", b"data")
        with self.assertRaises(UnsupportedFormatError):
            extract_text(doc)

    def test_missing_extension_raises(self):
        with self.assertRaises(UnsupportedFormatError):
            extract_text(Document.from_upload("README", b"data"))

    def test_declared_format_from_filename(self):
        doc = Document.from_upload("My.Resume.PDF", b"")
        self.assertEqual(doc.declared_format, "pdf")
        self.assertEqual(doc.name, "My.Resume.PDF")


if __name__ == "__main__":
    unittest.main()
