"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        units = ["B", "KB", "MB", "GB", "TB", "PB"]
        for unit in units:
            if size_bytes < 1024:
                return f"{size_bytes:.2f}{unit}"
            size_bytes /= 1024
        return f"{size_bytes:.2f}EB"

    @staticmethod
    def parse_extensions(extensions_str: str) -> list:
        """
        Split a comma-separated extension list, ignoring whitespace and empty items.
        "txt, doc,,pdf" -> ["txt", "doc", "pdf"]
        """
        if not extensions_str:
            return []
        return [ext for ext in extensions_str.replace(" ", "").split(",") if ext]
