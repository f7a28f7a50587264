"""Services for git-version-report."""
