"""Loader tests: JSON/YAML decoding, pointers, references and parse errors."""
import json

import pytest

from bcguard.document import HttpMethod, Parameter, Reference, RequestBody, Schema
from bcguard.errors import SpecParseError
from bcguard.loader import load_document, load_file

PETSTORE = """
openapi: 3.1.0
info:
  title: Petstore
  version: 1.0.0
  description: Pets
paths:
  /pets/{petId}:
    get:
      summary: Info for a pet
      parameters:
        - name: petId
          in: path
          required: true
          example: 42
        - $ref: '#/components/parameters/Trace'
      responses:
        200:
          description: A pet
        default:
          $ref: '#/components/responses/Error'
    put:
      requestBody:
        $ref: '#/components/requestBodies/Pet'
      responses:
        '204':
          description: Updated
    x-internal: true
components:
  schemas:
    Pet:
      type: object
      required: [id, name]
      properties:
        id:
          type: integer
        tag:
          type: [string, 'null']
        owner:
          $ref: '#/components/schemas/Owner'
"""


@pytest.fixture
def petstore():
    return load_document(PETSTORE)


def test_info(petstore):
    assert petstore.openapi == '3.1.0'
    assert petstore.info.title == 'Petstore'
    assert petstore.info.description == 'Pets'


def test_operations_keyed_by_method(petstore):
    item = petstore.paths['/pets/{petId}']
    assert list(item.operations) == [HttpMethod.GET, HttpMethod.PUT]
    assert item.operation(HttpMethod.DELETE) is None
    assert item.operation(HttpMethod.GET).summary == 'Info for a pet'


def test_parameters_and_references(petstore):
    params = petstore.paths['/pets/{petId}'].operation(HttpMethod.GET).parameters
    assert isinstance(params[0], Parameter)
    assert (params[0].name, params[0].location, params[0].required) == ('petId', 'path', True)
    assert params[0].example == 42
    assert isinstance(params[1], Reference)
    assert params[1].ref == '#/components/parameters/Trace'


def test_status_codes_are_strings(petstore):
    responses = petstore.paths['/pets/{petId}'].operation(HttpMethod.GET).responses
    assert list(responses) == ['200', 'default']
    assert isinstance(responses['default'], Reference)


def test_request_body_reference(petstore):
    put = petstore.paths['/pets/{petId}'].operation(HttpMethod.PUT)
    assert isinstance(put.request_body, Reference)


def test_schemas(petstore):
    pet = petstore.components.schemas['Pet']
    assert isinstance(pet, Schema)
    assert pet.required == ['id', 'name']
    assert pet.properties['id'].type == 'integer'
    assert pet.properties['tag'].type == 'string|null'
    assert isinstance(pet.properties['owner'], Reference)


def test_pointers_escape_slashes_and_tildes():
    doc = load_document(json.dumps({
        'openapi': '3.0.0',
        'paths': {'/a~b/{id}': {'post': {
            'parameters': [{'name': 'id', 'in': 'path', 'required': True}],
            'requestBody': {'required': True, 'content': {}},
        }}},
    }))
    item = doc.paths['/a~b/{id}']
    post = item.operation(HttpMethod.POST)
    assert doc.pointer == ''
    assert item.pointer == '/paths/~1a~0b~1{id}'
    assert post.parameters[0].pointer == '/paths/~1a~0b~1{id}/post/parameters/0'
    assert isinstance(post.request_body, RequestBody)
    assert post.request_body.required is True
    assert post.request_body.pointer == '/paths/~1a~0b~1{id}/post/requestBody'


def test_absent_sections_are_empty():
    doc = load_document('{"openapi": "3.0.0"}')
    assert doc.paths == {}
    assert doc.components.schemas == {}
    assert doc.info.description is None


def test_load_file(tmp_path):
    f = tmp_path / 'openapi.yaml'
    f.write_text(PETSTORE, encoding='utf-8')
    assert '/pets/{petId}' in load_file(f).paths


@pytest.mark.parametrize('text', [
    'invalid yaml content [[[',
    'paths: [unclosed',
    '[1, 2, 3]',
    '42',
    '',
    'openapi: 3.0.0\npaths: [/users]',
    'openapi: 3.0.0\npaths:\n  /users:\n    get:\n      parameters:\n        - in: query',
    'openapi: 3.0.0\ncomponents:\n  schemas:\n    User:\n      properties: 7',
])
def test_invalid_documents(text):
    with pytest.raises(SpecParseError, match='^Failed to parse OpenAPI spec: '):
        load_document(text)


def test_parse_error_keeps_cause():
    with pytest.raises(SpecParseError) as info:
        load_document('paths: [unclosed')
    assert info.value.__cause__ is not None


def test_load_file_rejects_invalid_utf8(tmp_path):
    path = tmp_path / 'latin1.yaml'
    path.write_bytes(b'openapi: 3.0.0\ninfo:\n  title: \xff\xfe\n')
    with pytest.raises(SpecParseError, match='^Failed to parse OpenAPI spec: ') as info:
        load_file(path)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_non_string_scalars_are_coerced():
    doc = load_document("""
openapi: 3.0.0
paths:
  /items:
    get:
      summary: 2024-01-01
      description: 42
      parameters:
        - name: 1
          in: query
      responses:
        '200':
          description: true
components:
  schemas:
    Item:
      type: object
      properties:
        id:
          type: 5
""")
    op = doc.paths['/items'].operation(HttpMethod.GET)
    assert op.summary == '2024-01-01'
    assert op.description == '42'
    assert op.parameters[0].name == '1'
    assert op.responses['200'].description == 'True'
    assert doc.components.schemas['Item'].properties['id'].type == '5'
