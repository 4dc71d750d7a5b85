import pytest

from sqsmove.errors import MalformedPayloadError
from sqsmove.transfer.transform import apply_filter, decode, matches_filter, serialize


class TestCase:

    def test_decode(self):
        message = {'MessageId': 'm-1', 'ReceiptHandle': 'r-1', 'Body': '{"id": 1, "text": "keep me"}'}
        assert decode(message) == {'id': 1, 'text': 'keep me'}

    def test_decode_malformed(self):
        with pytest.raises(MalformedPayloadError) as info:
            decode({'MessageId': 'm-7', 'Body': 'not json'})
        assert 'm-7' in str(info.value)

    def test_serialize_is_compact(self):
        assert serialize({'id': 1, 'text': 'keep me'}) == '{"id":1,"text":"keep me"}'

    def test_serialize_keeps_unicode(self):
        assert serialize({'name': 'Zoë'}) == '{"name":"Zoë"}'

    @pytest.mark.parametrize('decoded', [
        {'id': 1, 'nested': {'list': [1, 2.5, None, True]}},
        ['a', 'b'],
        'plain',
        42,
        None,
    ])
    def test_round_trip(self, decoded):
        assert decode({'Body': serialize(decoded)}) == decoded

    def test_filter_keeps_matching(self):
        messages = [{'id': 1, 'text': 'keep me'}, {'id': 2, 'text': 'drop me'}]
        kept, dropped = apply_filter(messages, 'keep')
        assert kept == [{'id': 1, 'text': 'keep me'}]
        assert dropped == 1

    def test_filter_is_literal_and_case_sensitive(self):
        assert matches_filter({'text': 'a.b'}, 'a.b')
        assert not matches_filter({'text': 'axb'}, 'a.b')
        assert not matches_filter({'text': 'Keep'}, 'keep')

    def test_filter_matches_serialized_form(self):
        assert matches_filter({'id': 1}, '"id":1')
