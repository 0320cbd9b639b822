from itertools import product
from typing import Iterable, Optional, Tuple

FormField = Tuple[str, bytes, Optional[str], Optional[str]]


def cases(*args):
    def decorator(func):
        def wrapper(self, *inner_args, **kwargs):
            for arg in args:
                with self.subTest(arg=arg):
                    func(self, arg, *inner_args, **kwargs)

        return wrapper

    return decorator


def case_matrix(*args_list):
    def decorator(func):
        def wrapper(self, *inner_args, **kwargs):
            for args in product(*args_list):
                with self.subTest(args=args):
                    func(self, *args, *inner_args, **kwargs)

        return wrapper

    return decorator


def build_multipart_body(boundary: str, fields: Iterable[FormField]) -> bytes:
    """
    Build a multipart/form-data body the way browsers send it.

    Args:
        boundary (str): Boundary token
        fields (Iterable[FormField]): (name, data, filename, content_type) per part

    Returns:
        bytes: Body closed with the terminator boundary
    """
    body = bytearray()
    for name, data, filename, content_type in fields:
        body += b"--" + boundary.encode() + b"\r\n"
        disposition = f'Content-Disposition: form-data; name="{name}"'
        if filename is not None:
            disposition += f'; filename="{filename}"'
        body += disposition.encode() + b"\r\n"
        if content_type is not None:
            body += f"Content-Type: {content_type}\r\n".encode()
        body += b"\r\n" + data + b"\r\n"
    body += b"--" + boundary.encode() + b"--"
    return bytes(body)
