"""Pipeline orchestration.

Runs the stages once per invocation:
1. Fetch the feed → scoped HTTP response
2. Decode the body → FeedEnvelope
3. Report → header, matching events, summary
"""
