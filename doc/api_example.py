import io
import formdata

fields = [
    ('title', 'Quarterly report'),
    ('author', 'J. Doe'),
]
uploads = [
    ('attachment', 'report "final".pdf', b'%PDF-1.7 ...'),
]

body = formdata.MultipartFormData()

for (name, value) in fields:
    part = formdata.field(name, value)
    if not formdata.okay(part):
        raise part
    body.append(part)

for (name, filename, data) in uploads:
    part = formdata.file(name, filename, data)
    if not formdata.okay(part):
        raise part
    body.append(part)

with io.open('body.bin', 'wb') as f:
    f.write(body.to_bytes())
print(body.content_type)
