from geovalidity.schemas.responses.validity_report import Position, ProblemEntry, ValidityReport
