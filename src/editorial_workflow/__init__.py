"""Editorial moderation workflow with semantic versions and translation revisions."""
