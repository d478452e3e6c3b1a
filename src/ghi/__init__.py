"""ghi - work with GitHub issues from the command line."""
