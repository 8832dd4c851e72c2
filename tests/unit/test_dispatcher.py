import json
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from fitbit_scheduler.dispatcher import Dispatcher, utc_now
from fitbit_scheduler.domain import (
    SERVICE,
    ConfigNotFoundError,
    InvalidConfigError,
    PublishError,
)
from fitbit_scheduler.domain.ports import MessageQueue, SchedulerConfig
from tests.conftest import MOCK_NOW, QUEUE_URL, SCHEDULER_NAME


class TestDispatcher:
    def test_dispatch_sends_one_message_to_queue(self, dispatcher, message_queue):
        message_id = dispatcher.dispatch(SCHEDULER_NAME)

        assert len(message_queue.sent) == 1
        sent = message_queue.sent[0]
        assert sent.destination == QUEUE_URL
        assert sent.message_id == message_id

    def test_dispatch_request_body(self, dispatcher, message_queue):
        dispatcher.dispatch(SCHEDULER_NAME)

        request = json.loads(message_queue.sent[0].body)
        assert len(request) == 2
        assert request["service"] == SERVICE

        body = request["body"]
        assert len(body) == 1
        assert body["date"] == "2017-12-16"

    def test_dispatch_exact_wire_format(self, dispatcher, message_queue):
        dispatcher.dispatch(SCHEDULER_NAME)

        assert message_queue.sent[0].body == (
            '{"service":"FitBitWorker","body":{"date":"2017-12-16"}}'
        )

    def test_dispatch_logs_destination_and_request(self, dispatcher):
        with capture_logs() as logs:
            dispatcher.dispatch(SCHEDULER_NAME)

        sending = [entry for entry in logs if entry["event"] == "Sending request"]
        assert len(sending) == 1
        assert sending[0]["log_level"] == "info"
        assert sending[0]["sqs_queue_url"] == QUEUE_URL
        assert sending[0]["request_json"] == (
            '{"service":"FitBitWorker","body":{"date":"2017-12-16"}}'
        )

    def test_failed_config_lookup_logs_no_request(self, config_store):
        dispatcher = Dispatcher(config_store, MagicMock(spec=MessageQueue), clock=lambda: MOCK_NOW)

        with capture_logs() as logs, pytest.raises(ConfigNotFoundError):
            dispatcher.dispatch("unknown-scheduler")

        assert all(entry["event"] != "Sending request" for entry in logs)

    def test_dispatch_uses_local_date_across_dst_start(self, config_store, message_queue):
        # 00:30 PDT on the first full day of DST; a fixed -08:00 offset would say 03-10
        dispatcher = Dispatcher(
            config_store=config_store,
            message_queue=message_queue,
            clock=lambda: datetime(2018, 3, 12, 7, 30, tzinfo=UTC),
        )

        dispatcher.dispatch(SCHEDULER_NAME)

        assert json.loads(message_queue.sent[0].body)["body"]["date"] == "2018-03-11"

    def test_each_dispatch_sends_a_new_message(self, dispatcher, message_queue):
        dispatcher.dispatch(SCHEDULER_NAME)
        dispatcher.dispatch(SCHEDULER_NAME)

        assert len(message_queue.sent) == 2
        assert message_queue.sent[0].body == message_queue.sent[1].body

    def test_missing_config_raises_before_publish(self, config_store):
        queue = MagicMock(spec=MessageQueue)
        dispatcher = Dispatcher(config_store, queue, clock=lambda: MOCK_NOW)

        with pytest.raises(ConfigNotFoundError, match="unknown-scheduler"):
            dispatcher.dispatch("unknown-scheduler")

        queue.publish.assert_not_called()

    @pytest.mark.parametrize("queue_url", [None, ""])
    def test_unusable_queue_url_raises_before_publish(self, config_store, queue_url):
        config_store.put(SchedulerConfig(scheduler_name=SCHEDULER_NAME, sqs_queue_url=queue_url))
        queue = MagicMock(spec=MessageQueue)
        dispatcher = Dispatcher(config_store, queue, clock=lambda: MOCK_NOW)

        with pytest.raises(InvalidConfigError, match="sqsQueueUrl"):
            dispatcher.dispatch(SCHEDULER_NAME)

        queue.publish.assert_not_called()

    def test_empty_scheduler_name_rejected(self, dispatcher, message_queue):
        with pytest.raises(ValueError):
            dispatcher.dispatch("")

        assert message_queue.sent == []

    def test_publish_error_propagates(self, dispatcher, message_queue):
        message_queue.error = PublishError("queue unavailable")

        with pytest.raises(PublishError, match="queue unavailable"):
            dispatcher.dispatch(SCHEDULER_NAME)

        assert message_queue.sent == []

    def test_publish_receives_serialized_request(self, config_store):
        queue = MagicMock(spec=MessageQueue)
        queue.publish.return_value = "msg-1"
        dispatcher = Dispatcher(config_store, queue, clock=lambda: MOCK_NOW)

        assert dispatcher.dispatch(SCHEDULER_NAME) == "msg-1"
        queue.publish.assert_called_once_with(
            QUEUE_URL, '{"service":"FitBitWorker","body":{"date":"2017-12-16"}}'
        )


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo is UTC
