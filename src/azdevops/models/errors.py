class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Organization required. Pass organization= or collection_uri=, or set the AZURE_DEVOPS_ORG or SYSTEM_COLLECTIONURI environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class ProjectMissingError(Exception):
    def __init__(
        self,
        message="Project required. Pass project= or set the SYSTEM_TEAMPROJECT environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
