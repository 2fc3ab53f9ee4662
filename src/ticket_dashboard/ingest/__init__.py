"""Row source: decode a spreadsheet file into row records."""
