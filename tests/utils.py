"""Helpers shared by the test modules."""

import json

import requests


def make_response(status_code=200, json_body=None, text=''):
    """A real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = 'utf-8'
    body = json.dumps(json_body) if json_body is not None else text
    response._content = body.encode('utf-8')
    return response


def sent_payload(post):
    """The JSON body of the single call made to a mocked requests.post."""
    post.assert_called_once()
    return post.call_args.kwargs['json']
