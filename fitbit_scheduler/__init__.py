"""FitBit scheduler: publishes the daily FitBitWorker request to SQS."""
