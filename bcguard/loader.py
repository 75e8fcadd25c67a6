"""Turn raw JSON/YAML text into a :class:`~bcguard.document.Document`."""
import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .document import (Components, Document, HttpMethod, Info, Operation,
                       Parameter, PathItem, Reference, RequestBody, Response,
                       Schema)
from .errors import SpecParseError

logger = logging.getLogger(__name__)


class _ShapeError(ValueError):
    pass


def _child(pointer, key):
    token = str(key).replace('~', '~0').replace('/', '~1')
    return f'{pointer}/{token}'


def _mapping(value, pointer):
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _ShapeError(f'expected an object at "{pointer or "/"}", '
                          f'got {type(value).__name__}')
    return value


def _sequence(value, pointer):
    if value is None:
        return []
    if not isinstance(value, list):
        raise _ShapeError(f'expected an array at "{pointer}", '
                          f'got {type(value).__name__}')
    return value


def _is_ref(raw):
    return isinstance(raw, dict) and '$ref' in raw


def _ref(raw, pointer):
    return Reference(ref=str(raw['$ref']), pointer=pointer)


def decode(text: str):
    """Decode as JSON, falling back to YAML."""
    try:
        data = json.loads(text)
        logger.debug('decoded document as JSON')
        return data
    except ValueError:
        pass
    data = yaml.safe_load(text)
    logger.debug('decoded document as YAML')
    return data


def load_document(text: str) -> Document:
    """Parse raw text into a document, raising SpecParseError on any failure."""
    try:
        raw = decode(text)
        if not isinstance(raw, dict):
            raise _ShapeError(f'document root must be an object, '
                              f'got {type(raw).__name__}')
        return _document(raw)
    except (yaml.YAMLError, _ShapeError, ValidationError) as e:
        raise SpecParseError.from_cause(e) from e


def load_file(path) -> Document:
    try:
        text = Path(path).read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise SpecParseError.from_cause(e) from e
    return load_document(text)


def _text(value):
    return str(value) if value is not None else None


def _document(raw):
    paths_raw = _mapping(raw.get('paths'), '/paths')
    paths = {str(p): _path_item(item, _child('/paths', p))
             for p, item in paths_raw.items()}
    logger.debug('loaded %d paths', len(paths))
    return Document(
        openapi=str(raw['openapi']) if raw.get('openapi') is not None else None,
        info=_info(raw.get('info'), '/info'),
        paths=paths,
        components=_components(raw.get('components'), '/components'),
        pointer='',
    )


def _info(raw, pointer):
    raw = _mapping(raw, pointer)
    return Info(
        title=str(raw.get('title') or ''),
        version=str(raw.get('version') or ''),
        description=_text(raw.get('description')),
        pointer=pointer,
    )


def _path_item(raw, pointer):
    raw = _mapping(raw, pointer)
    operations = {}
    for method in HttpMethod:
        if raw.get(method.value) is not None:
            operations[method] = _operation(raw[method.value],
                                            _child(pointer, method.value))
    return PathItem(operations=operations, pointer=pointer)


def _operation(raw, pointer):
    raw = _mapping(raw, pointer)
    params_ptr = _child(pointer, 'parameters')
    parameters = [_parameter(p, _child(params_ptr, i))
                  for i, p in enumerate(_sequence(raw.get('parameters'), params_ptr))]
    responses_ptr = _child(pointer, 'responses')
    responses = {str(code): _response(r, _child(responses_ptr, code))
                 for code, r in _mapping(raw.get('responses'), responses_ptr).items()}
    body = raw.get('requestBody')
    return Operation(
        summary=_text(raw.get('summary')),
        description=_text(raw.get('description')),
        parameters=parameters,
        responses=responses,
        request_body=_request_body(body, _child(pointer, 'requestBody'))
        if body is not None else None,
        pointer=pointer,
    )


def _parameter(raw, pointer):
    if _is_ref(raw):
        return _ref(raw, pointer)
    raw = _mapping(raw, pointer)
    return Parameter(
        name=_text(raw.get('name')),
        location=_text(raw.get('in')),
        required=bool(raw.get('required', False)),
        description=_text(raw.get('description')),
        example=raw.get('example'),
        pointer=pointer,
    )


def _request_body(raw, pointer):
    if _is_ref(raw):
        return _ref(raw, pointer)
    raw = _mapping(raw, pointer)
    return RequestBody(
        required=bool(raw.get('required', False)),
        description=_text(raw.get('description')),
        content=_mapping(raw.get('content'), _child(pointer, 'content')),
        pointer=pointer,
    )


def _response(raw, pointer):
    if _is_ref(raw):
        return _ref(raw, pointer)
    raw = _mapping(raw, pointer)
    return Response(description=_text(raw.get('description')), pointer=pointer)


def _schema(raw, pointer):
    if _is_ref(raw):
        return _ref(raw, pointer)
    raw = _mapping(raw, pointer)
    type_ = raw.get('type')
    if isinstance(type_, list):
        type_ = '|'.join(str(t) for t in type_)
    else:
        type_ = _text(type_)
    props_ptr = _child(pointer, 'properties')
    properties = {str(name): _schema(prop, _child(props_ptr, name))
                  for name, prop in _mapping(raw.get('properties'), props_ptr).items()}
    required = [str(r) for r in _sequence(raw.get('required'), _child(pointer, 'required'))]
    return Schema(type=type_, properties=properties, required=required,
                  pointer=pointer)


def _components(raw, pointer):
    raw = _mapping(raw, pointer)
    schemas_ptr = _child(pointer, 'schemas')
    schemas = {str(name): _schema(s, _child(schemas_ptr, name))
               for name, s in _mapping(raw.get('schemas'), schemas_ptr).items()}
    return Components(schemas=schemas, pointer=pointer)
