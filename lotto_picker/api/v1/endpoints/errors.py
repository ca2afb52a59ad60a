"""Map application errors onto HTTP errors."""

from contextlib import contextmanager

from fastapi import HTTPException

from lotto_picker.exceptions import DatasetNotFound, EmptyDataset, UnknownGame


@contextmanager
def http_errors():
    try:
        yield
    except UnknownGame as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except DatasetNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except EmptyDataset as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
