"""Record APIs - Presentation Layer (SoC)

One set of resources serves every entity; the service class is passed in
through flask-restful's resource_class_kwargs.
"""
from flask_restful import Resource
from school_records.exceptions.error_handler import handle_service_error
from school_records.services.report.excel_export_service import ExcelExportService
from school_records.utils.pagination.pagination_utils import normalize_pagination
from school_records.utils.formatting.json_utils import sanitize_mongo_document
from school_records.utils.validation.input_validator import (
    get_json_data, get_optional_query_params, get_filter_params
)

class RecordResourceBase(Resource):
    def __init__(self, service_class, entity: str):
        self.service = service_class()
        self.entity = entity

    def _project(self, documents):
        return sanitize_mongo_document([self.service.transform(doc) for doc in documents])

class RecordListResource(RecordResourceBase):
    def get(self):
        try:
            params = get_optional_query_params(page=None, perPage=None)
            page, per_page = normalize_pagination(params["page"], params["perPage"])
            documents = self.service.list(page, per_page)
            return {"success": True, "data": self._project(documents)}, 200

        except Exception as e:
            return handle_service_error(e)

    def post(self):
        try:
            document = self.service.create(get_json_data())
            return {"success": True, "data": sanitize_mongo_document(self.service.transform(document))}, 201

        except Exception as e:
            return handle_service_error(e)

class RecordDetailResource(RecordResourceBase):
    def get(self, record_id):
        try:
            document = self.service.get(record_id)
            return {"success": True, "data": sanitize_mongo_document(self.service.transform(document))}, 200

        except Exception as e:
            return handle_service_error(e)

    def put(self, record_id):
        try:
            document = self.service.update(record_id, get_json_data())
            return {"success": True, "data": sanitize_mongo_document(self.service.transform(document))}, 200

        except Exception as e:
            return handle_service_error(e)

class RecordDownloadResource(RecordResourceBase):
    def get(self):
        try:
            params = get_optional_query_params(start=None, end=None, format="json")
            filters = get_filter_params(self.service.filter_fields, self.service.fields)
            documents = self.service.list_download(params["start"], params["end"], **filters)

            if params["format"] == "xlsx":
                rows = [self.service.transform(doc) for doc in documents]
                return ExcelExportService.export_to_excel(rows, self.entity)
            return {"success": True, "data": self._project(documents)}, 200

        except Exception as e:
            return handle_service_error(e)

class RecordCountResource(RecordResourceBase):
    def get(self):
        try:
            params = get_optional_query_params(start=None, end=None, type=None)
            result = self.service.filtered_count(params["type"], params["start"], params["end"])
            return {"success": True, "data": sanitize_mongo_document(result)}, 200

        except Exception as e:
            return handle_service_error(e)

class StudentFormCountResource(RecordResourceBase):
    def get(self):
        try:
            return {"success": True, "data": self.service.form_count()}, 200

        except Exception as e:
            return handle_service_error(e)
