# coding=utf-8


class NotEnabled(Exception):
    """
    Not enabled.
    """


class MissingArtifact(Exception):
    """
    A required artifact was not gathered.
    """

    def __init__(self, name, *args, **kwargs):
        self.name = name
        super().__init__('Required {} artifact is missing'.format(name), *args, **kwargs)


class MainResourceNotFound(Exception):
    """
    No network record matches the final URL.
    """

    def __init__(self, *args, url=None, **kwargs):
        self.url = url
        super().__init__(*args, **kwargs)
