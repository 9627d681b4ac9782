"""
String Helper Functions
Laravel-style string manipulation utilities
"""


class Str:
    """
    String manipulation helper class (Laravel-style)
    """

    @staticmethod
    def title(value: str) -> str:
        """
        Convert a string to Title Case

        Example:
            Str.title('user_comments')  # 'User Comments'
            Str.title('photo-albums')  # 'Photo Albums'
        """
        if not value:
            return value

        value = value.replace('_', ' ').replace('-', ' ')

        return value.title()
