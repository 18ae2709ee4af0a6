"""Canned CMS payloads shared by the gateway tests."""

ARTICLE = {
    "_id": "65a1b2c3d4e5f6a7b8c9d0e1",
    "title": "Hello",
    "slug": "hello",
    "perex": "Lead",
    "content": "Body",
    "authorId": "author-1",
    "status": "published",
    "tags": ["news"],
    "createdAt": 1700000000000,
    "updatedAt": 1700000001000,
}
