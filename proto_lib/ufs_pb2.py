# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: ufs.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\tufs.proto\x12\x03ufs\"G\n\x14\x43reateUfsFileOptions\x12\x0c\n\x04user\x18\x01 \x01(\t\x12\r\n\x05group\x18\x02 \x01(\t\x12\x12\n\nposix_perm\x18\x03 \x01(\t\"P\n\x14\x43reateUfsFileRequest\x12\x0c\n\x04path\x18\x01 \x01(\t\x12*\n\x07options\x18\x02 \x01(\x0b\x32\x19.ufs.CreateUfsFileOptions')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'ufs_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _CREATEUFSFILEOPTIONS._serialized_start=18
  _CREATEUFSFILEOPTIONS._serialized_end=89
  _CREATEUFSFILEREQUEST._serialized_start=91
  _CREATEUFSFILEREQUEST._serialized_end=171
# @@protoc_insertion_point(module_scope)
