"""Build a rich text message in one chain — zero config, zero deps."""

from richstream import Color3, Font, rich

message = (
    rich("Warning: ")
    .bold()
    .font_color3(Color3.from_hex("#ff8000"))
    .add("disk almost full")
    .italic()
    .font_face_enum(Font.Gotham)
    .font_size(18)
    .break_line()
    .add("free up space soon")
)
print(message)
