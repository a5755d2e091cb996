SUBSTITUTE = 0x1A
ASCII_MAX = 127

REPLACEMENT_CHAR = "�"

TEXT_ENCODING = "ascii"
RAW_ENCODING = "utf-8"
