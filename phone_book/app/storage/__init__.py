"""
Persistence for the phone book.

record_codec converts between contacts and record lines of the form
`NAME,"NUM1, NUM2"`; contact_store owns the in-memory mapping and rewrites the
whole file after each change.
"""
