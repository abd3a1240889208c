# contactbook

A small HTTP JSON API for managing a list of contacts, built on Flask.
Contacts are kept in a single JSON file, so there is no database to set up.

Each contact (`contactbook.models.Contact`) has four fields:

| field   | type    | notes                                    |
|---------|---------|------------------------------------------|
| `id`    | integer | assigned by the service when stored      |
| `name`  | string  |                                          |
| `email` | string  | may be empty                             |
| `phone` | string  | may be empty                             |

Missing or `null` fields in a request body keep their empty defaults; a
field of the wrong type is rejected with `400`.

## Running the server

```
contactbook
```

Options:

| option         | default   | meaning                        |
|----------------|-----------|--------------------------------|
| `--host`       | `0.0.0.0` | address to listen on           |
| `--port`       | `8080`    | port to listen on              |
| `--data PATH`  | see below | path of the contacts file      |

Without `--data`, contacts are stored in the file given by
`contactbook.storage.default_data_path()`. The file is created empty on
first use; its directory must already exist.

The server is Flask's built-in development server, started through
`app.run`. For production use, serve the application returned by
`contactbook.app.create_app()` with a WSGI server of your choice.

## Endpoints

The contact endpoints live under `/contacts`.

| method   | path                        | result |
|----------|-----------------------------|--------|
| `GET`    | `/contacts/`                | every contact, in stored order (`null` when there are none) |
| `POST`   | `/contacts/`                | stores the contact under a new id; responds `201` with the body as it was sent |
| `GET`    | `/contacts/<id>`            | one contact; `400` for a non-numeric id; an empty contact (id `0`) when no contact has that id |
| `PUT`    | `/contacts/<id>`            | replaces the contact, keeping its id; responds `201`; when no contact has that id nothing is saved and an empty contact is returned |
| `DELETE` | `/contacts/<id>`            | removes the contact; `204`, or `404` when absent |
| `GET`    | `/contacts/summary`         | totals and duplicated names |
| `GET`    | `/contacts/search?name=...` | contacts whose name starts with the query, ignoring case (`null` when none match); `400` when `name` is missing or empty |
| `GET`    | `/contacts/email-providers` | an object mapping e-mail domain to number of contacts |
| `GET`    | `/swagger/doc.json`         | a Swagger 2.0 description of the API |

Ids in the path must be decimal integers (an optional sign allowed) within
the signed 64-bit range.

Errors are reported as JSON of the form `{"error": "..."}`. A failure to
read or write the contacts file is reported as `500` by most endpoints.

A new contact gets an id one higher than the largest id already stored
(`1` for an empty list).

The summary holds `total`, `with_email` and `with_phone` (counting fields
that are not blank), `last_contact_name` (the name of the last stored
contact) and `duplicated_names` (lower-cased names that occur more than
once); the last two are left out when empty.

E-mail providers are counted only for addresses with exactly one `@`; the
domain is lower-cased.

## Using it from Python

The storage and service layers can be used without the web server:

```python
from contactbook.models import Contact
from contactbook.services import ContactService
from contactbook.storage import JsonContactStore

service = ContactService(JsonContactStore("contacts.json"))
service.add_contact(Contact(name="Alice", email="alice@example.com"))

print(service.search_contacts_by_name("al"))
print(service.get_email_providers())   # {'example.com': 1}
print(service.get_contacts_summary().to_dict())
```

`ContactService.delete_contact_by_id` raises
`contactbook.services.ContactNotFoundError` when no contact has the id.
`JsonContactStore` raises `contactbook.storage.StorageFileNotFoundError`
when the directory meant to hold the file does not exist.

`ContactService` accepts any object with `load()` and `save(contacts)`
methods, so another store can be put in place of the JSON file.

To serve a store of your own choosing, build the Flask application yourself:

```python
from contactbook.app import create_app
from contactbook.storage import JsonContactStore

app = create_app(JsonContactStore("contacts.json"))
app.run(port=8080)
```

The API description can also be built directly with
`contactbook.docs.swagger_spec()`; its header (title, host, base path and
so on) comes from the shared `contactbook.docs.SWAGGER_INFO`, an instance
of `SwaggerInfo`.

## What it does not do

Only the Swagger JSON document is served; there is no interactive
documentation page. There is no authentication, and concurrent writers to
the same contacts file are not coordinated.

## Tests

Install the `test` extra and run pytest from the project directory.