from __future__ import annotations

from io import BytesIO

import pytest
from openpyxl import load_workbook

from src.classroom_manager.classroom_manager.core.exceptions import StoreError
from src.classroom_manager.classroom_manager.main import create_app

ROSTER = b"Student ID,First Name,Last Name\nS001,Ana,Lee\nS002,,Kim\nS003,Cy,Ng\n"


def _client(store, user_id="prof-1"):
    app = create_app(container=store.container(), settings_module="config.testing")
    client = app.test_client()
    if user_id:
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
    return client


@pytest.fixture
def client(store):
    return _client(store)


def _upload(client, class_id, payload=ROSTER, filename="roster.csv"):
    return client.post(
        f"/api/classes/{class_id}/students/import",
        data={"file": (BytesIO(payload), filename)},
        content_type="multipart/form-data",
    )


def test_requires_session_user(store):
    client = _client(store, user_id=None)

    res = client.get("/api/classes")

    assert res.status_code == 401
    assert res.get_json()["success"] is False


def test_create_and_list_classes(client):
    res = client.post("/api/classes", json={"name": "Databases", "code": "CS310", "term": "Spring"})
    assert res.status_code == 201
    class_id = res.get_json()["class_id"]

    listed = client.get("/api/classes").get_json()["classes"]

    assert [(c["class_id"], c["name"], c["student_count"], c["session_count"]) for c in listed] == [
        (class_id, "Databases", 0, 0)
    ]


def test_create_class_requires_name(client):
    res = client.post("/api/classes", json={"name": "  "})
    assert res.status_code == 400


def test_other_professors_class_is_not_found(store, class_id):
    client = _client(store, user_id="prof-2")
    assert client.get(f"/api/classes/{class_id}").status_code == 404


def test_import_preview_then_confirm(client, store, class_id):
    res = _upload(client, class_id)

    body = res.get_json()
    assert res.status_code == 200
    assert body["count"] == 2
    assert [r["studentId"] for r in body["rows"]] == ["S001", "S003"]
    assert store.students.count_for_class(class_id) == 0

    res = client.post(f"/api/classes/{class_id}/students/import/confirm", json={"rows": body["rows"]})

    assert res.get_json()["imported"] == 2
    students = client.get(f"/api/classes/{class_id}/students?q=ng").get_json()["students"]
    assert [s["student_id"] for s in students] == ["S003"]


def test_unsupported_upload_is_rejected(client, class_id):
    res = _upload(client, class_id, payload=b"hello", filename="roster.pdf")

    assert res.status_code == 400
    assert res.get_json()["reason"] == "unsupported_format"


def test_upload_without_valid_rows(client, class_id):
    res = _upload(client, class_id, payload=b"Name\nAna\n")

    assert res.status_code == 400
    assert res.get_json()["reason"] == "no_valid_rows"


def test_session_attendance_and_grades_flow(client, store, class_id):
    assert client.post(f"/api/classes/{class_id}/sessions").status_code == 400

    rows = _upload(client, class_id).get_json()["rows"]
    client.post(f"/api/classes/{class_id}/students/import/confirm", json={"rows": rows})
    session_id = client.post(f"/api/classes/{class_id}/sessions").get_json()["session_id"]
    pks = [s.id for s in store.students.list_for_class(class_id)]

    sheet = client.get(f"/api/sessions/{session_id}/attendance").get_json()
    assert set(sheet["statuses"].values()) == {"absent"}

    res = client.put(f"/api/sessions/{session_id}/attendance", json={"statuses": {str(pks[0]): "present"}})
    assert res.get_json()["saved"] == 2

    res = client.put(
        f"/api/classes/{class_id}/grades",
        json={"grades": [{"student_pk": pks[0], "midterm": 45, "final": 40, "activity": 200}]},
    )
    saved = {g["student_pk"]: g for g in res.get_json()["grades"]}
    assert saved[pks[0]]["total"] == 185
    assert saved[pks[1]]["total"] == 0

    report = client.get(f"/api/classes/{class_id}/report").get_json()
    assert report["total_students"] == 2
    assert report["attendance_rate"] == 50
    assert report["grade_distribution"]["A"] == 1
    assert report["grade_distribution"]["F"] == 1


def test_report_download(client, store, class_id):
    rows = _upload(client, class_id).get_json()["rows"]
    client.post(f"/api/classes/{class_id}/students/import/confirm", json={"rows": rows})

    res = client.get(f"/api/classes/{class_id}/report.xlsx")

    assert res.status_code == 200
    assert "class-report.xlsx" in res.headers["Content-Disposition"]
    wb = load_workbook(BytesIO(res.data))
    assert wb.sheetnames == ["Class Report"]


class BrokenStudents:
    def list_for_class(self, class_id):
        raise StoreError("permission denied for table students")

    def count_for_class(self, class_id):
        raise StoreError("permission denied for table students")


def test_store_failure_reports_message(store, class_id):
    store.students = BrokenStudents()
    client = _client(store)

    res = client.get(f"/api/classes/{class_id}/students")

    assert res.status_code == 502
    assert res.get_json()["message"] == "permission denied for table students"


def test_oversized_upload_is_413(client, class_id):
    # config.testing caps uploads at 2 MB
    payload = b"Student ID,First Name,Last Name\n" + b"S0001,Ana,Lee\n" * 230_000

    res = _upload(client, class_id, payload=payload)

    assert res.status_code == 413
    assert res.get_json()["success"] is False


class FailingGradeWrites:
    def __init__(self, grades):
        self._grades = grades

    def list_for_class(self, class_id):
        return self._grades.list_for_class(class_id)

    def upsert_many(self, *, class_id, records):
        raise StoreError("Lock wait timeout exceeded; try restarting transaction")


def test_failed_grade_save_reports_store_message(store, class_id):
    rows = [{"studentId": "S001", "firstName": "Ana", "lastName": "Lee"}]
    grades = store.grades
    store.grades = FailingGradeWrites(grades)
    client = _client(store)
    client.post(f"/api/classes/{class_id}/students/import/confirm", json={"rows": rows})
    pk = store.students.list_for_class(class_id)[0].id

    res = client.put(f"/api/classes/{class_id}/grades", json={"grades": [{"student_pk": pk, "midterm": 70}]})

    assert res.status_code == 502
    assert res.get_json()["message"] == "Lock wait timeout exceeded; try restarting transaction"
    assert grades.list_for_class(class_id) == []


class FailingStudentWrites:
    def __init__(self, students):
        self._students = students

    def count_for_class(self, class_id):
        return self._students.count_for_class(class_id)

    def upsert_many(self, *, class_id, rows):
        raise StoreError("Duplicate entry for key 'uq_students_class_student'")


def test_failed_import_confirm_leaves_roster_unchanged(store, class_id):
    students = store.students
    store.students = FailingStudentWrites(students)
    client = _client(store)

    res = client.post(
        f"/api/classes/{class_id}/students/import/confirm",
        json={"rows": [{"studentId": "S001", "firstName": "Ana", "lastName": "Lee"}]},
    )

    assert res.status_code == 502
    assert "Duplicate entry" in res.get_json()["message"]
    assert students.count_for_class(class_id) == 0
