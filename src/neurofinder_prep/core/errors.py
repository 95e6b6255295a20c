class DatasetError(Exception):
    """Failure confined to a single dataset; the batch moves on."""

    def __init__(self, dataset_id: str, message: str) -> None:
        super().__init__("{}: {}".format(dataset_id, message))
        self.dataset_id = dataset_id
        self.message = message


class DownloadError(DatasetError):
    pass


class ExtractionError(DatasetError):
    pass


class ImagesNotFoundError(DatasetError):
    pass


class RegionsError(DatasetError):
    pass


class PublishError(DatasetError):
    pass
