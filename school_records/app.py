"""Flask application - registers the record resources for every entity"""
import logging
from flask import Flask
from flask_cors import CORS
from flask_restful import Api, Resource
from school_records.api.record_api import (
    RecordListResource, RecordDetailResource, RecordDownloadResource,
    RecordCountResource, StudentFormCountResource
)
from school_records.logging_logs.log_config import setup_logging
from school_records.services.student.student_service import StudentService
from school_records.services.parent.parent_service import ParentService
from school_records.services.registration.registration_service import RegistrationService
from school_records.services.payment_type.payment_type_service import PaymentTypeService

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

ENTITIES = {
    "students": StudentService,
    "parents": ParentService,
    "registrations": RegistrationService,
    "payment-types": PaymentTypeService,
}

class HealthCheck(Resource):
    def get(self):
        return {"message": "School records service is running"}, 200

def register_resources(api: Api) -> None:
    api.add_resource(HealthCheck, "/")

    student_kwargs = {"service_class": StudentService, "entity": "students"}
    api.add_resource(StudentFormCountResource, f"{API_PREFIX}/students/form-count",
                     resource_class_kwargs=student_kwargs)

    for entity, service_class in ENTITIES.items():
        kwargs = {"service_class": service_class, "entity": entity}
        base = f"{API_PREFIX}/{entity}"
        api.add_resource(RecordListResource, base,
                         endpoint=f"{entity}_list", resource_class_kwargs=kwargs)
        api.add_resource(RecordDownloadResource, f"{base}/download",
                         endpoint=f"{entity}_download", resource_class_kwargs=kwargs)
        api.add_resource(RecordCountResource, f"{base}/count",
                         endpoint=f"{entity}_count", resource_class_kwargs=kwargs)
        api.add_resource(RecordDetailResource, f"{base}/<string:record_id>",
                         endpoint=f"{entity}_detail", resource_class_kwargs=kwargs)

def create_app(config: dict = None) -> Flask:
    setup_logging()

    app = Flask(__name__)
    if config:
        app.config.update(config)
    CORS(app)

    api = Api(app)
    register_resources(api)

    logger.info("School records API initialised")
    return app

def main():
    create_app().run(host="0.0.0.0", port=5000)

if __name__ == "__main__":
    main()
