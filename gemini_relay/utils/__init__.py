"""Utility helpers package for uploads, encoding, extraction, IDs, and I/O.

Modules here stage multipart uploads on disk, base64-encode attachments,
extract text from DOCX/PDF documents, and generate unique file names.
"""
