class Filters:
    SUPPRESSED_ERRORS = (
        "MissingPermissions",
        "NotOwner",
        "CommandNotFound",
        "MissingRequiredArgument",
        "BadArgument",
    )

    @staticmethod
    def filterlogs(record):
        # Suppress common, non-critical command errors
        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
            # discord.py wraps command errors in CommandInvokeError
            original = getattr(error, "original", error)
            names = {error.__class__.__name__, original.__class__.__name__}
            if names.intersection(Filters.SUPPRESSED_ERRORS):
                return False  # Don't log this record
        return True
