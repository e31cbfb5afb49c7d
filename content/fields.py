from rest_framework import serializers

MALFORMED_SKILL = "malformed_skill"


class CommaSeparatedListField(serializers.ListField):
    """List of strings that also accepts ``"React, Node.js,  MongoDB"``.

    Every incoming item is split on commas, trimmed, and empty pieces are
    dropped, so form input and JSON arrays end up the same.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("child", serializers.CharField(max_length=100))
        kwargs.setdefault("allow_empty", False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = [data]
        if isinstance(data, (list, tuple)):
            data = [
                piece.strip()
                for item in data
                for piece in str(item).split(",")
                if piece.strip()
            ]
        return super().to_internal_value(data)


class SkillLinesField(serializers.Field):
    """Skill list of a skill category.

    Form input is one ``name,level`` pair per line; JSON input may also be a
    list of ``{"name": ..., "level": ...}`` objects. Blank lines are ignored.
    Any line that does not parse fails the whole field.
    """

    default_error_messages = {
        "empty": "This list may not be empty.",
        "invalid": "Expected text lines or a list of skills.",
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            entries = [line for line in data.splitlines() if line.strip()]
        elif isinstance(data, (list, tuple)):
            entries = list(data)
        else:
            self.fail("invalid")
        if not entries:
            self.fail("empty")
        return [self._parse_entry(entry) for entry in entries]

    def to_representation(self, value):
        return [{"name": item["name"], "level": item["level"]} for item in value or []]

    def _parse_entry(self, entry):
        if isinstance(entry, dict):
            raw = f"{entry.get('name', '')},{entry.get('level', '')}"
        else:
            raw = str(entry)
        parts = [part.strip() for part in raw.split(",") if part.strip()]
        if len(parts) != 2:
            self._malformed(raw)
        name, level = parts
        try:
            level = int(level)
        except ValueError:
            self._malformed(raw)
        if not 0 <= level <= 100:
            self._malformed(raw)
        return {"name": name, "level": level}

    def _malformed(self, line):
        raise serializers.ValidationError(f"Invalid skill format: {line.strip()}", code=MALFORMED_SKILL)
