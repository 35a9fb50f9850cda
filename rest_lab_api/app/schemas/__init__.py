"""
Record models and wire formats.

``parolee`` holds the Pydantic model of a parolee record,
``parolee_xml`` converts records to and from their XML representation
and ``fibonacci`` parses the position lists sent to the rabbit counter.
"""
