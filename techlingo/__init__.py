"""Tools for Hebrew and Russian technical documents: domain and style detection, templates, term extraction, translation memory, validation reports and QA runners."""

__version__ = "0.1.0"